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
This module provides fixture data as Python variables and helpers for
building a board on a throwaway directory.
"""
import os
import shutil
import tempfile

from ..identity import IdentityResolver
from ..models.board import Board
from ..models.store import ContentStore

ALICE = '10.0.0.1:50123'
BOB = '10.0.0.2:40000'
CAROL = '10.0.0.3'

go_body = b"# Go\n"

full_body = b"""# Heading

Some *emphasis* and a [link](http://example.com/).

## Table

| a | b |
|---|---|
| 1 | 2 |

```
fenced code
```

~~gone~~
"""

hostile_body = b"""# Hello

<script>alert(1)</script>

<a href="http://example.com/" onclick="steal()">click</a>
"""


class TempBoard(object):
    """A board on fresh data and users directories."""

    def __init__(self):
        self.root = tempfile.mkdtemp(prefix='cynic-test-')
        self.data_dir = os.path.join(self.root, 'data')
        self.users_dir = os.path.join(self.root, 'users')
        self.store = ContentStore(self.data_dir)
        self.resolver = IdentityResolver(self.users_dir)
        self.board = Board(self.store, self.resolver)

    def cleanup(self):
        shutil.rmtree(self.root, ignore_errors=True)
