from sys import path
from os.path import dirname, abspath, join
from json import dumps
from argparse import ArgumentParser

path.append(join(dirname(abspath(__file__)), ".."))

from thinbus_srp import GlobalSettings

from typing import Dict, List, Optional

def create_verifier(identity: str, password: str, salt: Optional[str] = None,
                    settings: Optional[GlobalSettings] = None) -> Dict[str, str]:
    """
    Generate the registration data of a user, to store in the verifier database

    :param identity: Identity of the user
    :param password: Password of the user
    :param salt: Salt to use, a random one is generated if None
    :param settings: Group and digest to use, RFC 5054 2048-bit with SHA-256 if None

    :return: { "identity": identity, "salt": salt, "verifier": verifier }
    """

    if settings is None:
        settings = GlobalSettings()

    factory = settings.to_factory()

    if salt is None:
        salt = factory.generate_random_salt()

    verifier = factory.generate_verifier(salt, identity, password)

    return { "identity": identity, "salt": salt, "verifier": verifier }

def main(argv: Optional[List[str]] = None) -> str:
    parser = ArgumentParser(description = "Create the salt and verifier of a user")
    parser.add_argument("identity", help = "Identity of the user (username or email)")
    parser.add_argument("password", help = "Password of the user")
    parser.add_argument("-s", "--salt", nargs = '?', default = None, help = "Salt as hex. Default to a random salt")
    parser.add_argument("--hash", nargs = '?', default = "SHA256", help = "Hash algorithm. Default is SHA256")
    args = parser.parse_args(argv)

    settings = GlobalSettings(hash = args.hash)
    output = dumps(create_verifier(args.identity, args.password, args.salt, settings), indent = 4)
    print(output)

    return output

if __name__ == "__main__":
    main()
