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
Comments left on a topic, ready for display.
"""
from ..exceptions import NotFound, StoreUnavailable
from ..rendering import render
from .assessment import assessment_of, reaction_for

import logging
logger = logging.getLogger(__name__)


class CommentView(object):

    def __repr__(self):
        return "<CommentView %s %s>" % (self.identity, self.assessment)

    def __init__(self, identity, html, assessment, reaction):
        self.identity = identity
        self.html = html
        self.assessment = assessment
        self.reaction = reaction

    def as_dict(self):
        return {
            'user': self.identity,
            'body': self.html,
            'assessment': self.assessment,
            'reaction': self.reaction,
        }


class CommentCollector(object):

    def __init__(self, store):
        self.store = store

    def collect(self, title):
        """Renders every comment on the topic.

        A comment that can no longer be read is logged and left out; the
        rest are still returned.
        """
        comments = []
        for identity in sorted(self.store.list_identities_with_comment(title)):
            try:
                markdown = self.store.get_comment(title, identity)
                assessment = assessment_of(self.store, title, identity)
            except (NotFound, StoreUnavailable) as e:
                logger.warning('Skipping comment by %s on %s: %s',
                               identity, title, e)
                continue
            logger.debug('Found comment by %s on %s', identity, title)
            comments.append(CommentView(
                identity,
                render(title, markdown),
                assessment,
                reaction_for(assessment),
            ))
        return comments
