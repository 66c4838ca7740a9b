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
Topic statistics.

A topic's counts are worked out from the store every time they are
asked for; nothing derived is ever written back. Only identities that
left a comment count: their assessment (Shrug unless they chose) adds to
exactly one of the sentiment tallies, so the three tallies always add up
to the number of comments.
"""
from .assessment import HOT, NOT, SHRUG, assessment_of

import logging
logger = logging.getLogger(__name__)


def hotness_percent(hot_count, comment_count):
    """Share of commenters who said Hot, as a whole percentage."""
    if comment_count <= 0:
        return 0
    # round half up
    return (hot_count * 200 + comment_count) // (comment_count * 2)


class TopicSummary(object):

    def __repr__(self):
        return "<TopicSummary %s %s%%>" % (self.title, self.hotness_percent)

    def __init__(self, title, hot_count=0, not_count=0, shrug_count=0,
                 comment_count=0):
        self.title = title
        self.hot_count = hot_count
        self.not_count = not_count
        self.shrug_count = shrug_count
        self.comment_count = comment_count

    def __eq__(self, other):
        if not isinstance(other, TopicSummary):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    @property
    def hotness_percent(self):
        return hotness_percent(self.hot_count, self.comment_count)

    def add(self, assessment):
        """Count one commenter with the given assessment."""
        self.comment_count += 1
        if assessment == HOT:
            self.hot_count += 1
        elif assessment == NOT:
            self.not_count += 1
        else:
            # unknown values read back from disk count as Shrug
            if assessment != SHRUG:
                logger.debug('Counting assessment %r on %s as %s',
                             assessment, self.title, SHRUG)
            self.shrug_count += 1

    def as_dict(self):
        return {
            'title': self.title,
            'hot_count': self.hot_count,
            'not_count': self.not_count,
            'shrug_count': self.shrug_count,
            'comment_count': self.comment_count,
            'hotness_percent': self.hotness_percent,
        }


class TopicAggregator(object):
    """Computes topic summaries and splits topics by whether a viewer has
    already commented on them.

    Every topic is checked against every known identity, so the cost grows
    with topics times identities.
    """

    def __init__(self, store, resolver):
        self.store = store
        self.resolver = resolver

    def identities_for(self, title, known=None):
        """Identities whose state on the topic has to be looked at."""
        if known is None:
            known = self.resolver.known_identities()
        return set(known) | self.store.list_identities_with_comment(title)

    def summarize(self, title, known=None):
        summary = TopicSummary(title)
        for identity in self.identities_for(title, known):
            if not self.store.has_comment(title, identity):
                continue
            summary.add(assessment_of(self.store, title, identity))
        return summary

    def list_topics(self, viewer):
        """Returns ``(current, old)`` lists of TopicSummary for a viewer.

        ``current`` holds the topics the viewer has not commented on yet,
        ``old`` the ones they have.
        """
        known = self.resolver.known_identities()
        current = []
        old = []
        for title in sorted(self.store.list_topics()):
            summary = self.summarize(title, known)
            if self.store.has_comment(title, viewer):
                old.append(summary)
            else:
                current.append(summary)
        logger.debug('%s current and %s old topics for %s',
                     len(current), len(old), viewer)
        return current, old

    def next_topic(self, viewer, title):
        """The current topic to send the viewer to after ``title``.

        Wraps around to the first current topic, which is also where a
        viewer goes when ``title`` is no longer current. Returns None
        when nothing is left to comment on.
        """
        current, old = self.list_topics(viewer)
        titles = [summary.title for summary in current]
        if not titles:
            return None
        if title not in titles:
            return titles[0]
        index = titles.index(title)
        return titles[(index + 1) % len(titles)]
