import os
import sys

import tornado.options
from tornado.log import app_log
from tornado.options import define, options

from .generator import KeyGenerator


define('key_size', default=KeyGenerator.key_size, type=int,
       help="RSA modulus size in bits")


def main(argv=None):
    "Write the key pair to $LOCKDOWN_PUBLIC_KEY and $LOCKDOWN_PRIVATE_KEY."
    tornado.options.parse_command_line(sys.argv if argv is None else argv)

    public_key_path = os.getenv('LOCKDOWN_PUBLIC_KEY', "public.pem")
    private_key_path = os.getenv('LOCKDOWN_PRIVATE_KEY', "private.pem")

    generator = KeyGenerator(key_size=options.key_size)
    key_files = generator.create_key_pair(public_key_path, private_key_path)
    app_log.info("Created key pair %s", key_files)
    return key_files


if __name__ == '__main__':
    main()
