import json
from sqlalchemy.orm import Session
from app.models.core import AuditLog, AuditAction

def log_audit(db: Session, actor: str | None, entity: str, entity_id: str,
              action: AuditAction, before: dict | None = None, after: dict | None = None):
    entry = AuditLog(
        actor=actor,
        entity=entity, entity_id=entity_id,
        action=action,
        before=json.dumps(before) if before else None,
        after=json.dumps(after) if after else None,
    )
    db.add(entry)
    return entry
