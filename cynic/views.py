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

from pyramid.httpexceptions import HTTPFound

from .exceptions import InvalidAssessment, InvalidKind, NotFound
from .utils import is_valid_title, require_post, require_title, text_error

import logging
logger = logging.getLogger(__name__)


def viewer(request):
    """Identity of the client making the request."""
    return request.root.resolve(request.remote_addr)


def redirect_home(context, request):
    return HTTPFound(location=request.route_url('topics'))


def store_unavailable(context, request):
    logger.error('Store unavailable: %s', context)
    return text_error(500, str(context))


def topics(context, request):
    board = request.root
    user = viewer(request)
    current, old = board.list_topics(user)
    return {
        'title': board.title,
        'user': user,
        'current_topics': [summary.as_dict() for summary in current],
        'old_topics': [summary.as_dict() for summary in old],
    }


@require_title
def view(context, request):
    title = request.matchdict['topic']
    board = request.root
    user = viewer(request)

    try:
        page = board.load_topic(title, user)
    except NotFound:
        return HTTPFound(location=request.route_url('edit', topic=title))

    return {
        'title': page.title,
        'user': user,
        'body': page.html,
        'markdown': page.comment,
        'assessment': page.assessment,
        'comments': [comment.as_dict() for comment in page.comments],
    }


@require_title
def edit(context, request):
    title = request.matchdict['topic']
    board = request.root
    user = viewer(request)

    try:
        markdown = board.load_body(title)
    except NotFound:
        markdown = ''

    return {
        'title': title,
        'user': user,
        'markdown': markdown,
    }


@require_post
@require_title
def save(context, request):
    title = request.matchdict['topic']
    markdown = request.POST.get('markdown', '')
    mode = request.POST.get('mode', '')
    assessment = request.POST.get('assessment', '')
    next_ = request.POST.get('next', '')

    board = request.root
    user = viewer(request)

    try:
        board.save(title, user, mode, markdown=markdown,
                   assessment=assessment)
    except (InvalidKind, InvalidAssessment) as e:
        return text_error(400, str(e))

    if next_ == 'Next':
        following = board.next_topic(user, title)
        if following is None:
            return HTTPFound(location=request.route_url('topics'))
        return HTTPFound(location=request.route_url('view', topic=following))

    return HTTPFound(location=request.route_url('view', topic=title))


def new(context, request):
    title = request.params.get('topic', '')
    if not is_valid_title(title):
        return HTTPFound(location=request.route_url('topics'))
    return HTTPFound(location=request.route_url('edit', topic=title))
