from sqlalchemy.orm import Session

from app.exceptions import ResourceNotFoundError

def get_object_or_404(db: Session, model, object_id: int, message: str):
    """
    Fetches a row by primary key or fails.

    Args:
        db: Database session
        model: Mapped class (Team, TeamMember, Project)
        object_id: Primary key
        message: Error message template with one {} slot for the id

    Returns:
        The model instance

    Raises:
        ResourceNotFoundError: If no row has that id
    """
    obj = db.get(model, object_id)
    if obj is None:
        raise ResourceNotFoundError(message.format(object_id))
    return obj
