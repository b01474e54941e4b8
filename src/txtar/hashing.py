# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
"""Content digests for txtar archive members."""
import binascii

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

_hash_algorithms = {
    'sha1': hashes.SHA1,
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
}

hash_algorithms = sorted(_hash_algorithms)


def make_hasher(hash_algo):
    """Create a hashing object for the given algorithm name."""
    try:
        algorithm = _hash_algorithms[hash_algo]
    except KeyError:
        raise ValueError("Unsupported hash algorithm: %s" % hash_algo)
    return hashes.Hash(algorithm(), default_backend())


def hash_content(content, hash_algo='sha256', encoding='utf-8'):
    """Return the hex digest of `content`.

    Args:
        content (str): text to hash; it is encoded with `encoding` first
        hash_algo (str): one of 'sha1', 'sha256' or 'sha384'
        encoding (str): text encoding. Defaults to 'utf-8'

    Returns:
        hex encoded digest as a str

    """
    h = make_hasher(hash_algo)
    h.update(content.encode(encoding))
    return binascii.hexlify(h.finalize()).decode('ascii')
