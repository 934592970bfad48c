"""User persistence: lookups by email/id, insert, list."""

from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository:
    """Thin wrapper over a Session for the users table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        return self.session.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.session.query(User).filter(User.id == user_id).first()

    def list_all(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()

    def insert(self, user: User) -> User:
        """Persist a new user and return it with generated id and timestamps."""
        try:
            self.session.add(user)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user
