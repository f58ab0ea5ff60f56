"""
Create a user from the command line. Run from project root:
  python -m libapp.scripts.create_user EMAIL PASSWORD [--first-name NAME] [--last-name NAME]
Example:
  python -m libapp.scripts.create_user test@test.com 123 --first-name Test
"""
import argparse
import logging
import sys

from libapp.core.database import SessionLocal
from libapp.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN
from libapp.services.authenticator import register_user
from libapp.services.errors import EmailAlreadyRegistered

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a libapp user.")
    parser.add_argument("email", help=f"Email (1-{EMAIL_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--first-name", default="")
    parser.add_argument("--last-name", default="")
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email or len(email) > EMAIL_MAX_LEN:
        logger.error("Invalid email length.")
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        logger.error("Password must be 1-%s characters.", PASSWORD_MAX_LEN)
        return 1

    db = SessionLocal()
    try:
        user = register_user(
            db,
            email=email,
            password=args.password,
            first_name=args.first_name,
            last_name=args.last_name,
        )
    except EmailAlreadyRegistered as e:
        logger.error("User '%s' already exists.", e.email)
        return 1
    finally:
        db.close()
    logger.info("Created user %s (id=%s).", user.email, user.id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
