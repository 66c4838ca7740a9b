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

import optparse
import textwrap
import sys

from pyramid.paster import bootstrap
from pyramid.request import Request

from .identity import token_for


def _bootstrap(config_uri):
    request = Request.blank('/', base_url='http://localhost/')
    return bootstrap(config_uri, request=request)


def show_topics(argv=None):
    description = """
    Lists every topic with its comment and sentiment counts. Given an
    address, also shows whether the identity behind it has commented on
    each topic yet.

    Arguments:
        config_uri: the pyramid configuration to use for the board
        address: optional client address to show topics for

    Example usage:
        bin/show_topics development.ini 10.0.0.7
    """

    usage = "%prog config_uri [address]"
    parser = optparse.OptionParser(
        usage=usage,
        description=textwrap.dedent(description)
    )

    options, args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if not len(args) >= 1:
        print("You must provide a configuration file.")
        return 2
    config_uri = args[0]

    env = _bootstrap(config_uri)
    try:
        board = env['root']
        if len(args) >= 2:
            identity = token_for(args[1])
            print("Topics for %s (%s):" % (args[1], identity))
        else:
            identity = None
            print("Topics:")
        print("-------")

        if identity is None:
            groups = [('', [board.aggregator.summarize(title)
                             for title in sorted(board.store.list_topics())])]
        else:
            current, old = board.list_topics(identity)
            groups = [('current', current), ('old', old)]

        for label, summaries in groups:
            for summary in summaries:
                line = "%s\t%s%%\t%s comments\t%s hot\t%s not\t%s shrug" % (
                    summary.title,
                    summary.hotness_percent,
                    summary.comment_count,
                    summary.hot_count,
                    summary.not_count,
                    summary.shrug_count,
                )
                if label:
                    line = "%s\t%s" % (line, label)
                print(line)
    finally:
        env['closer']()
    return 0


def show_identities(argv=None):
    description = """
    Lists the identities the board has seen and the address each was
    first resolved from.
    Arguments:
        config_uri: the pyramid configuration to use for the board

    Example usage:
        bin/show_identities development.ini

    """

    usage = "%prog config_uri"
    parser = optparse.OptionParser(
        usage=usage,
        description=textwrap.dedent(description)
    )

    options, args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if not len(args) >= 1:
        print("You must provide a configuration file.")
        return 2
    config_uri = args[0]

    env = _bootstrap(config_uri)
    try:
        resolver = env['root'].resolver
        print("Identities:")
        print("-----------")
        for token in sorted(resolver.known_identities()):
            print("%s\t%s" % (token, resolver.address_of(token)))
    finally:
        env['closer']()
    return 0
