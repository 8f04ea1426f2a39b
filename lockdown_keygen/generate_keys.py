from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


PUBLIC_KEY_LABEL = 'RSA PUBLIC KEY'
PRIVATE_KEY_LABEL = 'RSA PRIVATE KEY'


def generate_keys(key_size=1024, public_exponent=65537, backend=None):
    """
    Generate an RSA key pair and return the PEM-encoded (private, public) bytes.

    Both keys are written in their PKCS#1 form, which yields the
    ``RSA PRIVATE KEY`` and ``RSA PUBLIC KEY`` PEM labels.
    """
    private_key = rsa.generate_private_key(
        public_exponent=public_exponent,
        key_size=key_size,
        backend=backend or default_backend()
    )
    public_key = private_key.public_key()
    public_pem = public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1
    )
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption()
    )
    return private_pem, public_pem
