"""
Create public/private key files for encrypting and decrypting credential data

Key material only lives in memory while it is encoded. Each key is written to
a new file; an existing file is never overwritten.
"""
import collections
import contextlib
import errno
import os
import threading

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.asymmetric import rsa
from tornado.log import app_log

from .generate_keys import generate_keys


KeyFiles = collections.namedtuple('KeyFiles', ['public_key', 'private_key'])

_backend = None
_backend_lock = threading.Lock()


def _initialize_backend():
    """Resolve the cryptography backend once per process.

    A throwaway RSA key is generated on first use, so a runtime without RSA
    support fails here with ``RuntimeError``.
    """
    global _backend
    with _backend_lock:
        if _backend is None:
            backend = default_backend()
            try:
                rsa.generate_private_key(public_exponent=65537, key_size=1024,
                                         backend=backend)
            except UnsupportedAlgorithm as e:
                raise RuntimeError("Error configuring key generator") from e
            _backend = backend
    return _backend


def _validate_destination(destination, name):
    if destination is None:
        raise ValueError("%s destination is required" % name)
    # Path('') normalizes to '.'
    if os.fspath(destination) in ('', '.', b'', b'.'):
        raise ValueError("%s destination must not be empty" % name)


def _check_absent(destination):
    if os.path.lexists(destination):
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST),
                              os.fspath(destination))


class KeyGenerator():

    key_size = 1024
    public_exponent = 65537

    def __init__(self, key_size=None):
        self.backend = _initialize_backend()
        if key_size is not None:
            self.key_size = key_size

    def create_key_pair(self, public_key_destination, private_key_destination):
        """Create a public/private pair of key files

        Returns a ``KeyFiles`` record of the two destinations, in the order
        given. Raises ``ValueError`` for a missing, empty or shared
        destination, ``FileExistsError`` if either destination exists,
        ``RuntimeError`` if the backend cannot generate RSA keys and
        ``OSError`` for any other write failure.

        If the private key cannot be written, the public key file written by
        this call is removed again.
        """
        _validate_destination(public_key_destination, 'Public key')
        _validate_destination(private_key_destination, 'Private key')
        if (os.path.abspath(os.fspath(public_key_destination)) ==
                os.path.abspath(os.fspath(private_key_destination))):
            raise ValueError("Public and private key destinations must differ")
        _check_absent(public_key_destination)
        _check_absent(private_key_destination)

        try:
            private_pem, public_pem = generate_keys(
                key_size=self.key_size,
                public_exponent=self.public_exponent,
                backend=self.backend,
            )
        except UnsupportedAlgorithm as e:
            raise RuntimeError("Error configuring key generator") from e

        self._write_pem(public_key_destination, public_pem, 'public key')
        try:
            self._write_pem(private_key_destination, private_pem, 'private key')
        except Exception:
            with contextlib.suppress(OSError):
                os.remove(public_key_destination)
            raise

        return KeyFiles(public_key_destination, private_key_destination)

    def _write_pem(self, destination, pem, kind):
        file = open(destination, 'xb')
        try:
            with file:
                file.write(pem)
        except Exception:
            os.remove(destination)
            raise
        app_log.info("Wrote %s to %s", kind, os.fspath(destination))
