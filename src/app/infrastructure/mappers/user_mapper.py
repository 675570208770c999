from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import User, UserRole
from src.app.infrastructure.entities.user_entity import UserEntity, UserRole as EntityUserRole


class UserMapper(BaseEntityMapper[User, UserEntity]):
    """Mapper for converting between User domain model and UserEntity."""

    @staticmethod
    def to_entity(model_instance: User) -> UserEntity:
        """Convert a User (domain model) to UserEntity (database entity)."""
        return UserEntity(
            id=model_instance.id,
            enterprise_id=model_instance.enterprise_id,
            auth_subject=model_instance.auth_subject,
            email=str(model_instance.email),
            first_name=model_instance.first_name,
            last_name=model_instance.last_name,
            department=model_instance.department,
            title=model_instance.title,
            role=EntityUserRole(model_instance.role.value),
            is_active=model_instance.is_active,
            created_at=model_instance.created_at,
        )

    @staticmethod
    def to_model(entity: UserEntity) -> User:
        """Convert a UserEntity (database entity) to User (domain model)."""
        return User(
            id=entity.id,
            enterprise_id=entity.enterprise_id,
            auth_subject=entity.auth_subject,
            email=entity.email,
            first_name=entity.first_name,
            last_name=entity.last_name,
            department=entity.department,
            title=entity.title,
            role=UserRole(entity.role.value),
            is_active=entity.is_active,
            created_at=entity.created_at,
        )
