"""
Create a user (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin@shop.io your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.database import SessionLocal
from app.core.roles import ROLE_USER, ROLES
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from app.repositories.users import UserRepository
from app.schemas.auth import RegisterRequest
from app.services.auth import AuthService
from app.services.errors import ServiceError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Storefront user.")
    parser.add_argument("email", help="Email address (login name)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=sorted(ROLES))
    args = parser.parse_args(argv)

    # Same validation and email normalization as POST /auth/register.
    try:
        request = RegisterRequest(
            email=args.email.strip(), password=args.password, role=args.role
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"Invalid {field}: {error['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = AuthService(UserRepository(db)).register(
            request.email, request.password, request.role
        )
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user id=%s role=%s via CLI", user.id, user.role)
    print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    sys.exit(main())
