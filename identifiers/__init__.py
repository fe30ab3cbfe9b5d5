from .generators import IdFormat, IdGeneratorError, SequentialIdGenerator, format_id, uuid_id

__all__ = ["IdFormat", "IdGeneratorError", "SequentialIdGenerator", "format_id", "uuid_id"]
