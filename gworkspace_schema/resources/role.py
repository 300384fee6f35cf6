"""Admin roles and role assignments."""
from __future__ import annotations

from ..core.schema import Block, Bool, ResourceSchema, SetNested, String
from ..core.validators import StringInSlice
from .common import TYPE_PREFIX, resource_id, scope_note

SCOPE_TYPES = ["CUSTOMER", "ORG_UNIT"]


def role_schema() -> ResourceSchema:
    privileges = SetNested(
        "privileges",
        [
            String("service_id", "The obfuscated ID of the service this privilege is for.", required=True),
            String("privilege_name", "The name of the privilege.", required=True),
        ],
        "The set of privileges that are granted to this role.",
        required=True,
    )
    return ResourceSchema(
        f"{TYPE_PREFIX}role",
        "Role resource manages admin roles. " + scope_note("admin.directory.rolemanagement"),
        Block([
            String("name", "Name of the role.", required=True),
            String("description", "A short description of the role.", optional=True),
            privileges,
            Bool("is_system_role", "Returns true if this is a pre-defined system role.", computed=True),
            Bool("is_super_admin_role", "Returns true if the role is a super admin role.", computed=True),
            resource_id("Role identifier"),
        ]),
    )


def role_assignment_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}role_assignment",
        "Role Assignment resource assigns an admin role to a user. " + scope_note("admin.directory.rolemanagement"),
        Block([
            String("role_id", "The ID of the role that is assigned.", required=True),
            String("assigned_to", "The unique ID of the user this role is assigned to.", required=True),
            String(
                "scope_type",
                "The scope in which this role is assigned.",
                optional=True,
                computed=True,
                default="CUSTOMER",
                validators=[StringInSlice(SCOPE_TYPES)],
            ),
            String(
                "org_unit_id",
                "If the role is restricted to an organization unit, the ID of that organization unit.",
                optional=True,
            ),
            resource_id("Role Assignment identifier"),
        ]),
    )
