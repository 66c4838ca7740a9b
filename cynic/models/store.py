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
The content store keeps every piece of user content as a markdown file in
a single data directory.

A slot is addressed by a topic title, a kind, and for the per-identity
kinds the identity token:

    go.md                       body of topic "go"
    go_comment_<token>.md       comment left on "go" by <token>
    go_assessment_<token>.md    assessment recorded on "go" by <token>

Titles are restricted to letters, digits and hyphens and tokens are hex
digests, so the ``_<kind>_`` marker can never be confused with either.
"""
import os

from zope.interface import Interface, implementer

from ..exceptions import InvalidAssessment, InvalidKind, InvalidTitle
from ..exceptions import NotFound, StoreUnavailable
from ..utils import atomic_write, is_valid_title
from .assessment import ASSESSMENTS

import logging
logger = logging.getLogger(__name__)

EDIT = 'edit'
COMMENT = 'comment'
ASSESSMENT = 'assessment'

KINDS = (EDIT, COMMENT, ASSESSMENT)
PER_IDENTITY_KINDS = (COMMENT, ASSESSMENT)

SUFFIX = '.md'


def slot_name(title, kind=EDIT, identity=None):
    """Compose the file name of a slot.

    Raises InvalidKind for an unknown kind, InvalidTitle for a title that
    could not be parsed back, and ValueError when a per-identity kind is
    requested without an identity.
    """
    if kind not in KINDS:
        raise InvalidKind('Invalid kind: %s' % (kind,))
    if not is_valid_title(title):
        raise InvalidTitle('Invalid topic title: %r' % (title,))
    if kind == EDIT:
        return title + SUFFIX
    if not identity or '_' in identity or os.sep in identity:
        raise ValueError('Invalid identity: %r' % (identity,))
    return '%s_%s_%s%s' % (title, kind, identity, SUFFIX)


def parse_slot_name(name):
    """Split a file name back into ``(title, kind, identity)``.

    Returns None for anything that is not a slot, such as temporary files
    left behind by an interrupted write.
    """
    if not name.endswith(SUFFIX):
        return None
    stem = name[:-len(SUFFIX)]

    if '_' not in stem:
        if not is_valid_title(stem):
            return None
        return (stem, EDIT, None)

    for kind in PER_IDENTITY_KINDS:
        marker = '_%s_' % kind
        if marker not in stem:
            continue
        title, identity = stem.split(marker, 1)
        if not is_valid_title(title) or not identity or '_' in identity:
            return None
        return (title, kind, identity)
    return None


class IContentStore(Interface):
    """Marker interface for content stores"""
    pass


@implementer(IContentStore)
class ContentStore(object):
    """Reads and writes slots under ``data_dir``.

    Every put replaces the whole slot; there is no append. Reads of an
    absent slot raise NotFound, any other I/O failure StoreUnavailable.
    """

    def __repr__(self):
        return "<ContentStore '%s'>" % self.data_dir

    def __init__(self, data_dir):
        self.data_dir = data_dir

    def path(self, title, kind=EDIT, identity=None):
        return os.path.join(self.data_dir, slot_name(title, kind, identity))

    def _read(self, path):
        try:
            with open(path, 'rb') as fh:
                return fh.read()
        except FileNotFoundError:
            raise NotFound(os.path.basename(path))
        except OSError as e:
            raise StoreUnavailable('Could not read %s: %s' % (path, e))

    def _write(self, path, data):
        atomic_write(path, data)
        logger.info('Wrote %s', os.path.basename(path))

    def _exists(self, path):
        return os.path.isfile(path)

    def _slots(self):
        """Yields ``(title, kind, identity)`` for every slot on disk."""
        try:
            names = os.listdir(self.data_dir)
        except FileNotFoundError:
            # nothing has been written yet
            return
        except OSError as e:
            raise StoreUnavailable(
                'Could not read data directory %s: %s' % (self.data_dir, e)
            )
        for name in names:
            parsed = parse_slot_name(name)
            if parsed is not None:
                yield parsed

    def get_body(self, title):
        return self._read(self.path(title))

    def put_body(self, title, data):
        self._write(self.path(title), data)

    def has_body(self, title):
        return self._exists(self.path(title))

    def get_comment(self, title, identity):
        return self._read(self.path(title, COMMENT, identity))

    def put_comment(self, title, identity, data):
        self._write(self.path(title, COMMENT, identity), data)

    def has_comment(self, title, identity):
        return self._exists(self.path(title, COMMENT, identity))

    def get_assessment(self, title, identity):
        """Returns the recorded assessment.

        Absence is reported as NotFound; mapping it to the default is up
        to the caller.
        """
        raw = self._read(self.path(title, ASSESSMENT, identity))
        return raw.decode('utf-8', 'replace').strip()

    def put_assessment(self, title, identity, value):
        if value not in ASSESSMENTS:
            raise InvalidAssessment('Invalid assessment: %r' % (value,))
        self._write(self.path(title, ASSESSMENT, identity), value)

    def list_topics(self):
        """Titles of every topic that has a body."""
        return set(title for (title, kind, identity) in self._slots()
                   if kind == EDIT)

    def list_identities_with_comment(self, title):
        return set(identity for (slot_title, kind, identity) in self._slots()
                   if kind == COMMENT and slot_title == title)
