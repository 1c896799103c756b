from typing import Optional
from ariadne import QueryType, MutationType, ObjectType
from shark_server.api.store import Record, RecordStore
from shark_server.api.utils.logger import write_log, log_person_event

query = QueryType()
mutation = MutationType()
person = ObjectType("Person")

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

def get_store(info) -> RecordStore:
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("no record store in GraphQL context")
    return store

@query.field("ping")
def resolve_ping(_, info):
    return "pong"

@query.field("health")
def resolve_health(_, info):
    return "ok"

@query.field("user")
def resolve_user(_, info, id: int):
    record = get_store(info).get_by_id(id)
    if record is None:
        log_person_event("person_not_found", id)
        return None
    log_person_event("person_lookup", id)
    return record

@query.field("users")
def resolve_users(_, info, tag: Optional[str] = None):
    records = get_store(info).list_by_tag(tag)
    write_log({"event": "people_listed", "tag": tag, "count": len(records)}, stream="store")
    return records

@mutation.field("updateUser")
def resolve_update_user(_, info, id: int, name: str, age: Optional[str] = None):
    return get_store(info).update_by_id(id, name, age)

@person.field("age")
def resolve_person_age(record: Record, info):
    age = record.age
    if age is None:
        return None
    try:
        value = int(age)
    except (TypeError, ValueError):
        value = None
    # GraphQL Int is 32-bit signed
    if value is None or not INT_MIN <= value <= INT_MAX:
        log_person_event("age_not_numeric", record.id, stream="schema", age=age)
        return None
    return value
