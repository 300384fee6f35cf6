"""Chrome policies applied to an org unit."""
from __future__ import annotations

from ..core.schema import Block, ListNested, MapOf, ResourceSchema, String
from ..core.validators import StringIsJson
from ..core.values import ValueKind
from .common import TYPE_PREFIX, resource_id, scope_note


def chrome_policy_schema() -> ResourceSchema:
    return ResourceSchema(
        f"{TYPE_PREFIX}chrome_policy",
        "Chrome Policy resource manages Chrome policies set on an org unit. "
        + scope_note("chrome.management.policy"),
        Block([
            String("org_unit_id", "The target org unit on which this policy is applied.", required=True),
            ListNested(
                "policies",
                [
                    String("schema_name", "The full qualified name of the policy schema.", required=True),
                    # each value is the JSON encoding of one policy field
                    MapOf(
                        "schema_values",
                        ValueKind.STRING,
                        "JSON encoded map that represents key/value pairs that correspond to the given schema.",
                        required=True,
                        validators=[StringIsJson()],
                    ),
                ],
                "Policies to set for the org unit.",
                required=True,
            ),
            resource_id(),
        ]),
    )
