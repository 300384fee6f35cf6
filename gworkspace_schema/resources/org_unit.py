"""Organizational units."""
from __future__ import annotations

from ..core.schema import Block, Bool, ResourceSchema, String
from ..core.validators import ExactlyOneOf
from .common import TYPE_PREFIX, resource_id, scope_note

PARENT_GROUP = ["parent_org_unit_id", "parent_org_unit_path"]


def org_unit_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}org_unit",
        "OrgUnit resource manages Google Workspace OrgUnits. " + scope_note("admin.directory.orgunit"),
        Block([
            String(
                "name",
                "The organizational unit's path name. For example, an organizational unit's name within the "
                "/corp/support/sales_support parent path is sales_support.",
                required=True,
            ),
            String("description", "Description of the organizational unit.", optional=True),
            Bool(
                "block_inheritance",
                "Determines if a sub-organizational unit can inherit the settings of the parent organization.",
                optional=True,
                computed=True,
                default=False,
            ),
            String("org_unit_id", "The unique ID of the organizational unit.", computed=True),
            String(
                "org_unit_path",
                "The full path to the organizational unit, derived from the parent path and the name.",
                computed=True,
            ),
            String(
                "parent_org_unit_id",
                "The unique ID of the parent organizational unit.",
                optional=True,
                computed=True,
                validators=[ExactlyOneOf(PARENT_GROUP)],
            ),
            String(
                "parent_org_unit_path",
                "The organizational unit's parent path. For example, /corp/sales is the parent path for "
                "/corp/sales/sales_support organizational unit.",
                optional=True,
                computed=True,
                validators=[ExactlyOneOf(PARENT_GROUP)],
            ),
            resource_id("Org Unit identifier"),
        ]),
    )
