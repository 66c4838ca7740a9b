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
Markdown rendering.

Content is rendered into a complete page with a table of contents, and
then cleaned down to markup that is safe to show to other visitors.
Malformed markdown never raises; it just renders as best it can.
"""
import html
import re

import markdown
import nh3
from markdown.blockprocessors import HashHeaderProcessor
from markdown.extensions import Extension

import logging
logger = logging.getLogger(__name__)

PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>%(title)s</title>
</head>
<body>
<nav>
%(toc)s
</nav>
<hr />
%(body)s
</body>
</html>
"""

# Elements removed together with everything inside them.
CLEAN_CONTENT_TAGS = {'script', 'style', 'title'}

LINK_REL = 'nofollow noopener noreferrer'

GENERIC_ATTRIBUTES = {'id', 'title', 'lang', 'dir'}


class SpaceHeaderProcessor(HashHeaderProcessor):
    """Only treat ``#`` as a header when a space follows it, in any block
    context: top level, block quotes and list items alike."""

    RE = re.compile(
        r'(?:^|\n)(?P<level>#{1,6})(?:[ \t]+|(?=\n|$))'
        r'(?P<header>(?:\\.|[^\\])*?)#*(?:\n|$)'
    )


class SpaceHeadersExtension(Extension):

    def extendMarkdown(self, md):
        # replaces the stock hash header processor
        md.parser.blockprocessors.register(
            SpaceHeaderProcessor(md.parser), 'hashheader', 70
        )


def make_markdown():
    return markdown.Markdown(
        extensions=[
            'tables',
            'fenced_code',
            'toc',
            'pymdownx.betterem',
            'pymdownx.tilde',
            'pymdownx.magiclink',
            SpaceHeadersExtension(),
        ],
        extension_configs={
            # no emphasis in the middle of words
            'pymdownx.betterem': {'smart_enable': 'all'},
            'pymdownx.tilde': {'subscript': False},
            'tables': {'use_align_attribute': True},
        },
        output_format='html',
    )


def render_page(title, text):
    """Render markdown into a complete, unsanitized HTML page."""
    if isinstance(text, bytes):
        text = text.decode('utf-8', 'replace')
    md = make_markdown()
    body = md.convert(text)
    return PAGE % {
        'title': html.escape(title or ''),
        'toc': md.toc,
        'body': body,
    }


def _allowed_attributes():
    attributes = dict(
        (tag, set(attrs)) for (tag, attrs) in nh3.ALLOWED_ATTRIBUTES.items()
    )
    attributes.setdefault('*', set()).update(GENERIC_ATTRIBUTES)
    attributes.setdefault('td', set()).add('align')
    attributes.setdefault('th', set()).add('align')
    return attributes


def sanitize(unsafe):
    """Strip everything outside of the user generated content allow list:
    formatting, links, lists, tables and code survive; scripts, styles,
    event handlers and unknown tags or attributes do not.
    """
    return nh3.clean(
        unsafe,
        tags=set(nh3.ALLOWED_TAGS),
        clean_content_tags=CLEAN_CONTENT_TAGS,
        attributes=_allowed_attributes(),
        link_rel=LINK_REL,
    )


def render(title, text):
    """Markdown to sanitized HTML."""
    return sanitize(render_page(title, text))
