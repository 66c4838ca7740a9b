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
An assessment is the sentiment one identity records on a topic.

Shrug is a choice of its own, and also what anyone who never picked is
taken to think.
"""
from ..exceptions import NotFound

HOT = 'Hot'
NOT = 'Not'
SHRUG = 'Shrug'

ASSESSMENTS = (HOT, NOT, SHRUG)
DEFAULT_ASSESSMENT = SHRUG

REACTIONS = {
    HOT: 'yes.gif',
    NOT: 'no.png',
    SHRUG: 'shrug.jpg',
}
DEFAULT_REACTION = 'maybe.png'


def assessment_of(store, title, identity):
    """The identity's assessment of the topic, Shrug if none was made."""
    try:
        return store.get_assessment(title, identity)
    except NotFound:
        return DEFAULT_ASSESSMENT


def reaction_for(assessment):
    """Name of the image shown next to a comment with this assessment."""
    return REACTIONS.get(assessment, DEFAULT_REACTION)
