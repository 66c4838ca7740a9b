"""
Copyright (c) 2013, Regents of the University of California
All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

  * Redistributions of source code must retain the above copyright notice,
    this list of conditions and the following disclaimer.

  * Redistributions in binary form must reproduce the above copyright notice,
    this list of conditions and the following disclaimer in the documentation
    and/or other materials provided with the distribution.

  * Neither the name of the University of California nor the names of its
    contributors may be used to endorse or promote products derived from this
    software without specific prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS" AND
ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED
WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""

"""
Settings read once from the ``[app:main]`` section when the application
starts, and handed to everything that needs them from there.
"""
import os

DEFAULTS = {
    'cynic.data_dir': 'data',
    'cynic.users_dir': 'users',
    'cynic.images_dir': 'images',
}


class BoardSettings(object):

    def __repr__(self):
        return "<BoardSettings data_dir=%s users_dir=%s>" % (
            self.data_dir, self.users_dir)

    def __init__(self, data_dir, users_dir, images_dir):
        self.data_dir = data_dir
        self.users_dir = users_dir
        self.images_dir = images_dir

    @classmethod
    def from_settings(cls, settings):
        """Relative directories are taken relative to the working
        directory the application was started from."""
        def directory(key):
            value = (settings.get(key) or DEFAULTS[key]).strip()
            return os.path.abspath(value)

        return cls(
            data_dir=directory('cynic.data_dir'),
            users_dir=directory('cynic.users_dir'),
            images_dir=directory('cynic.images_dir'),
        )
