"""Custom user schemas."""
from __future__ import annotations

from ..core.schema import Block, Bool, Float64, ListNested, ResourceSchema, SingleNested, String
from ..core.validators import StringInSlice
from .common import TYPE_PREFIX, resource_id, scope_note

FIELD_TYPES = ["BOOL", "DATE", "DOUBLE", "EMAIL", "INT64", "PHONE", "STRING"]
READ_ACCESS_TYPES = ["ADMINS_AND_SELF", "ALL_DOMAIN_USERS"]


def custom_schema_schema() -> ResourceSchema:
    numeric_indexing_spec = SingleNested(
        "numeric_indexing_spec",
        [
            Float64("min_value", "Minimum value of this field. Indicative rather than enforced.", optional=True),
            Float64("max_value", "Maximum value of this field. Indicative rather than enforced.", optional=True),
        ],
        "Indexing spec for a numeric field. Setting it allows range queries to be supported.",
        optional=True,
    )
    fields = ListNested(
        "fields",
        [
            String("field_name", "The name of the field.", required=True),
            String("field_id", "The unique identifier of the field.", computed=True),
            String(
                "field_type",
                "The type of the field.",
                required=True,
                validators=[StringInSlice(FIELD_TYPES)],
            ),
            Bool(
                "multi_valued",
                "A boolean specifying whether this is a multi-valued field or not.",
                optional=True,
                computed=True,
                default=False,
            ),
            Bool(
                "indexed",
                "A boolean specifying whether the field is indexed or not.",
                optional=True,
                computed=True,
                default=True,
            ),
            String("display_name", "Display Name of the field.", optional=True, computed=True),
            String(
                "read_access_type",
                "Specifies who can view values of this field. It may take up to 24 hours for changes "
                "to be reflected.",
                optional=True,
                computed=True,
                default="ALL_DOMAIN_USERS",
                validators=[StringInSlice(READ_ACCESS_TYPES)],
            ),
            numeric_indexing_spec,
        ],
        "A list of fields in the schema.",
        required=True,
    )
    return ResourceSchema(
        f"{TYPE_PREFIX}schema",
        "Schema resource manages Google Workspace custom user schemas. " + scope_note("admin.directory.userschema"),
        Block([
            String("schema_id", "The unique identifier of the schema.", computed=True),
            String("schema_name", "The schema's name.", required=True),
            String("display_name", "Display name for the schema.", optional=True, computed=True),
            fields,
            resource_id("Schema identifier"),
        ]),
    )
