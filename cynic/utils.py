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
Various utility functions.
"""
import os
import re
import tempfile

from functools import wraps

from pyramid.httpexceptions import HTTPFound, exception_response

from .exceptions import StoreUnavailable

import logging
logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r'^[a-zA-Z0-9-]+$')


def _request_from(args):
    # We could be called with (context, request) or just (request,)
    request = args[0]
    if len(args) > 1:
        request = args[1]
    return request


def require_post(fn):
    """Requires that a function receives a POST request,
       otherwise returning a 405 Method Not Allowed.

       Requires that a function recieves a Content-type
       of application/x-www-form-urlencoded otherwise returning
       a 406 Not Acceptable.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        request = _request_from(args)
        if request.method != "POST":
            response = exception_response(405)
            response.headers.extend([('Allow', 'POST')])
            return response

        if request.content_type != "application/x-www-form-urlencoded":
            response = exception_response(406)
            response.headers.extend(
                [('Accept', 'application/x-www-form-urlencoded')]
            )
            return response

        return fn(*args, **kwargs)
    return wrapper


def require_title(fn):
    """Sends the client back to the topic list unless the ``topic``
    segment of the matched route is a usable title.

    An empty segment is passed through; views decide what it means.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        request = _request_from(args)
        title = request.matchdict.get('topic', '') if request.matchdict else ''
        if title and not is_valid_title(title):
            logger.debug('Rejected topic title %r', title)
            return HTTPFound(location=request.route_url('topics'))
        return fn(*args, **kwargs)
    return wrapper


def is_valid_title(title):
    """Returns True if the title can be used to address a slot."""
    if not title:
        return False
    return TITLE_PATTERN.match(title) is not None


def text_error(status, message):
    """A plain text error response."""
    return exception_response(
        status,
        body=message.encode('utf-8'),
        content_type='text/plain',
        charset='UTF-8',
    )


def atomic_write(path, data, mode=0o600):
    """Replace the file at ``path`` with ``data`` in one step.

    The content is written to a temporary file next to the target and
    renamed over it, so readers see either the old or the new content.
    Missing parent directories are created.
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    directory = os.path.dirname(path) or '.'
    try:
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix='.', suffix='.tmp',
                                        dir=directory)
    except OSError as e:
        raise StoreUnavailable('Could not write to %s: %s' % (directory, e))

    try:
        with os.fdopen(fd, 'wb') as fh:
            fh.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError as e:
        try:
            os.unlink(tmp_path)
        except OSError:
            # never got as far as creating it
            pass
        raise StoreUnavailable('Could not write %s: %s' % (path, e))
