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
Identities are derived from the address a request came from.

The token is a SHA-1 digest of the host part of the address. It keeps raw
addresses out of slot names and is stable for as long as the client keeps
its address, but it is not authentication: clients behind one address
share an identity.
"""
import hashlib
import os
import re

from zope.interface import Interface, implementer

from .exceptions import StoreUnavailable
from .utils import atomic_write

import logging
logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r'[0-9a-f]{40}')


def host_of(address):
    """Strip the port from an address.

    Handles ``host``, ``host:port``, ``[v6]:port`` and bare IPv6.
    """
    if not address:
        return ''
    if address.startswith('['):
        return address[1:].split(']', 1)[0]
    if address.count(':') == 1:
        return address.split(':', 1)[0]
    return address


def token_for(address):
    host = host_of(address)
    return hashlib.sha1(host.encode('utf-8')).hexdigest()


def is_token(name):
    return TOKEN_PATTERN.fullmatch(name) is not None


class IIdentityResolver(Interface):
    """Marker interface for identity resolvers"""
    pass


@implementer(IIdentityResolver)
class IdentityResolver(object):
    """Turns addresses into identity tokens.

    When ``users_dir`` is set, the first resolution of a token records
    the address it came from in ``users_dir/<token>``. The recorded tokens
    are also the set of identities the board knows about.
    """

    def __repr__(self):
        return "<IdentityResolver '%s'>" % self.users_dir

    def __init__(self, users_dir=None):
        self.users_dir = users_dir

    def resolve(self, address):
        token = token_for(address)
        self.remember(token, address)
        return token

    def remember(self, token, address):
        """Record which address a token was made from.

        Failure is logged and otherwise ignored; resolution does not
        depend on it.
        """
        if not self.users_dir:
            return
        path = os.path.join(self.users_dir, token)
        if os.path.exists(path):
            return
        try:
            atomic_write(path, address or '')
        except StoreUnavailable as e:
            logger.warning('Could not record address for %s: %s', token, e)
            return
        logger.info('Recorded new identity %s', token)

    def address_of(self, token):
        """The address recorded for a token, or None."""
        if not self.users_dir or not is_token(token):
            return None
        try:
            with open(os.path.join(self.users_dir, token)) as fh:
                return fh.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StoreUnavailable('Could not read identity %s: %s'
                                   % (token, e))

    def known_identities(self):
        """Every token that has been recorded."""
        if not self.users_dir:
            return set()
        try:
            names = os.listdir(self.users_dir)
        except FileNotFoundError:
            return set()
        except OSError as e:
            raise StoreUnavailable(
                'Could not read users directory %s: %s' % (self.users_dir, e)
            )
        return set(name for name in names if is_token(name))
