from sqlalchemy.orm import Session
from storefront.data.models.user import UserModel
from storefront.repos.user_repo import UserRepo
from storefront.domain.schemas import UserCreate, UserRead


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        if self.repo.get_user_by_username(payload.username):
            raise ValueError("Username already taken")

        created = self.repo.create_user(
            UserModel(username=payload.username, password=payload.password)
        )
        return UserRead(id=created.id, username=created.username)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise ValueError("User not found")
        return UserRead(id=user.id, username=user.username)

    def get_user_by_username(self, username: str) -> UserRead | None:
        user = self.repo.get_user_by_username(username)
        return UserRead(id=user.id, username=user.username) if user else None
