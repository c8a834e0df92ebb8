# 📄 File: app/shared/utils/schemas.py
# 🧭 Purpose (Layman Explanation):
# The common shape for everything the API sends and receives, so field names look like
# ``plantId`` to the apps while the Python code keeps using ``plant_id``.
# 🧪 Purpose (Technical Summary):
# Pydantic base model with a camelCase alias generator, population by field name and
# attribute-based construction from domain objects.
# 🔗 Dependencies:
# pydantic (ConfigDict, alias_generators.to_camel)
# 🔄 Connected Modules / Calls From:
# Every module's presentation/api/schemas package

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request/response base: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    message: str
