"""Resource declarations, one builder per resource type.

``RESOURCE_BUILDERS`` is the list ``build_registry()`` registers by default.
"""
from .chrome_policy import chrome_policy_schema
from .domain import domain_alias_schema, domain_schema
from .gmail_send_as_alias import gmail_send_as_alias_schema
from .group import group_schema
from .group_member import group_member_schema, group_members_schema
from .group_settings import group_settings_schema
from .org_unit import org_unit_schema
from .role import role_assignment_schema, role_schema
from .schema import custom_schema_schema
from .user import user_schema

RESOURCE_BUILDERS = [
    chrome_policy_schema,
    domain_schema,
    domain_alias_schema,
    gmail_send_as_alias_schema,
    group_schema,
    group_member_schema,
    group_members_schema,
    group_settings_schema,
    org_unit_schema,
    role_schema,
    role_assignment_schema,
    custom_schema_schema,
    user_schema,
]

__all__ = ["RESOURCE_BUILDERS"] + [builder.__name__ for builder in RESOURCE_BUILDERS]
