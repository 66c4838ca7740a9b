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
The board ties the store, the identity resolver and the aggregation
together into the handful of operations the web layer needs.

The board itself does not have state, but does hold references to the
store and the resolver.
"""
from zope.interface import Interface, implementer

from ..exceptions import InvalidAssessment, InvalidKind, InvalidTitle
from ..exceptions import NotFound
from ..rendering import render
from ..utils import is_valid_title
from .assessment import ASSESSMENTS, assessment_of
from .comment import CommentCollector
from .store import ASSESSMENT, COMMENT, EDIT, KINDS
from .topic import TopicAggregator

import logging
logger = logging.getLogger(__name__)


class TopicPage(object):
    """Everything shown when a viewer looks at a topic."""

    def __init__(self, title, markdown, html, comment=None,
                 assessment=None, comments=None):
        self.title = title
        self.markdown = markdown
        self.html = html
        self.comment = comment
        self.assessment = assessment
        self.comments = comments or []


class IBoard(Interface):
    """Marker interface for board implementations"""
    pass


@implementer(IBoard)
class Board(object):
    __name__ = __parent__ = None
    title = "Topics"

    def __init__(self, store, resolver):
        self.store = store
        self.resolver = resolver
        self.aggregator = TopicAggregator(store, resolver)
        self.collector = CommentCollector(store)

    def resolve(self, address):
        """The identity token for a client address."""
        return self.resolver.resolve(address)

    def load_body(self, title):
        """Raw markdown of a topic; raises NotFound for a new topic."""
        return self.store.get_body(title).decode('utf-8', 'replace')

    def load_topic(self, title, identity):
        """
        Load a topic as the given identity sees it.

        Raises NotFound when the topic has no body yet.
        """
        markdown = self.load_body(title)
        try:
            comment = self.store.get_comment(title, identity)
            comment = comment.decode('utf-8', 'replace')
        except NotFound:
            comment = None
        return TopicPage(
            title,
            markdown,
            render(title, markdown),
            comment=comment,
            assessment=assessment_of(self.store, title, identity),
            comments=self.collector.collect(title),
        )

    def save(self, title, identity, kind, markdown='', assessment=''):
        """
        Save a submission from an identity.

        Args:
            title: (string) The topic saved to
            identity: (string) Token of the submitting client
            kind: (string) 'edit', 'comment' or 'assessment'
            markdown: (string) Body or comment text
            assessment: (string) Optional 'Hot', 'Not' or 'Shrug'

        Returns:
            True if anything was written, False for an empty submission.

        Everything is validated before the first write.
        """
        if kind not in KINDS:
            raise InvalidKind('Invalid kind: %s' % (kind,))
        if not is_valid_title(title):
            raise InvalidTitle('Invalid topic title: %r' % (title,))
        if assessment and assessment not in ASSESSMENTS:
            raise InvalidAssessment('Invalid assessment: %r' % (assessment,))

        if not (markdown or assessment):
            return False

        if kind == EDIT:
            if not markdown:
                return False
            self.store.put_body(title, markdown)
            logger.info('Saved body of topic %s', title)
        elif kind == COMMENT:
            if assessment:
                self.store.put_assessment(title, identity, assessment)
            self.store.put_comment(title, identity, markdown)
            logger.info('Saved comment by %s on topic %s', identity, title)
        elif kind == ASSESSMENT:
            if not assessment:
                return False
            self.store.put_assessment(title, identity, assessment)
            logger.info('Saved assessment by %s on topic %s',
                        identity, title)
        return True

    def list_topics(self, viewer):
        return self.aggregator.list_topics(viewer)

    def next_topic(self, viewer, title):
        return self.aggregator.next_topic(viewer, title)

    def collect(self, title):
        return self.collector.collect(title)
