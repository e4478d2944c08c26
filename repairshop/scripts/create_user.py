"""
Create a user (e.g. the first admin). Run from project root:
  python -m repairshop.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m repairshop.scripts.create_user owner your-secure-password admin
"""
import argparse
import logging
import sys

from repairshop.core.config import get_settings
from repairshop.core.database import build_engine, build_session_factory
from repairshop.core.errors import AuthServiceError
from repairshop.models.user import DEFAULT_ROLE, ROLES
from repairshop.repositories.users import SqlUserRepository
from repairshop.services.credentials import CredentialStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a repair shop user account.")
    parser.add_argument("username", help="Username (1-255 chars, case-sensitive)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default=DEFAULT_ROLE, choices=sorted(ROLES))
    args = parser.parse_args(argv)

    settings = get_settings()
    engine = build_engine(settings)
    db = build_session_factory(engine)()
    try:
        store = CredentialStore(SqlUserRepository(db), bcrypt_rounds=settings.BCRYPT_ROUNDS)
        user = store.register(args.username.strip(), args.password, args.role)
    except AuthServiceError as e:
        logger.error("Could not create user '%s': %s", args.username, e.message)
        return 1
    finally:
        db.close()
        engine.dispose()
    logger.info("Created user '%s' with role '%s'.", user.username, user.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
