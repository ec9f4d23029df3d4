import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from models.log import Log

logger = logging.getLogger(__name__)

# The audit trail never changes the outcome of the request it records
def write_log(db: Session, *, actor_email, action, resource, role=None, status="SUCCESS", ip=None, meta=None):
    entry = Log(actor_email=actor_email, role=role, action=action, resource=resource, status=status, ip=ip, meta=meta or {})
    try:
        db.add(entry)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to write %s/%s audit log for %s: %s", action, status, actor_email, e)
