"""Template field schema validation."""

from typing import Any

from resmgmt.domain.exceptions import ValidationError

FIELD_TYPES = frozenset(
    {
        "text",
        "textarea",
        "number",
        "email",
        "phone",
        "date",
        "time",
        "datetime",
        "select",
        "radio",
        "checkbox",
        "file",
    }
)
OPTION_FIELD_TYPES = frozenset({"select", "radio"})


def validate_fields_schema(schema: Any) -> dict[str, Any]:
    """Check the sections/fields structure of a template schema and return it.

    Raises ValidationError on the first problem found.
    """
    if not isinstance(schema, dict) or not schema:
        raise ValidationError("Template schema must be a non-empty object")

    sections = schema.get("sections")
    if not isinstance(sections, list):
        raise ValidationError("Template schema must have 'sections' array")
    if not sections:
        raise ValidationError("Template must have at least one section")

    for section in sections:
        if not isinstance(section, dict):
            raise ValidationError("Each section must be an object")
        section_name = section.get("name")
        if not isinstance(section_name, str) or not section_name:
            raise ValidationError("Each section must have a name")
        fields = section.get("fields")
        if not isinstance(fields, list):
            raise ValidationError("Each section must have a 'fields' array")
        if not fields:
            raise ValidationError("Each section must have at least one field")

        for field in fields:
            if not isinstance(field, dict):
                raise ValidationError("Each field must be an object")
            field_name = field.get("name")
            if not isinstance(field_name, str) or not field_name:
                raise ValidationError("Each field must have a name")
            field_type = field.get("type")
            if not isinstance(field_type, str) or not field_type:
                raise ValidationError("Each field must have a type")
            if field_type not in FIELD_TYPES:
                raise ValidationError(
                    f"Invalid field type: {field_type} in section {section_name}, field {field_name}"
                )
            if field_type in OPTION_FIELD_TYPES and "options" not in field:
                raise ValidationError("Select and radio fields must have options")

    return schema
