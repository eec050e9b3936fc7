"""Validators decoding DynamoDB attribute values into plain Python values.

Example:
    ```python
    from valknobs_core import objects, required
    from valknobs_dynamo import NUMBER, STRING, parse_number

    item = required().and_(objects.keys({
        "id": required().and_(STRING.is_()),
        "count": NUMBER.is_().and_(parse_number(throw_on_nan=True)),
    }))

    item({"id": {"S": "abc"}, "count": {"N": "12"}})
    # {'id': 'abc', 'count': 12}
    ```
"""

from .attributes import (
    BINARY,
    BINARY_SET,
    BOOLEAN,
    LIST,
    MAP,
    NUMBER,
    NUMBER_SET,
    STRING,
    STRING_SET,
    TAGS,
    AttributeType,
    DynamoNumber,
    isnull,
    nullable,
    number_format,
    parse_number,
    proper_keys,
    single_tag,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AttributeType",
    "BINARY",
    "BINARY_SET",
    "BOOLEAN",
    "DynamoNumber",
    "LIST",
    "MAP",
    "NUMBER",
    "NUMBER_SET",
    "STRING",
    "STRING_SET",
    "TAGS",
    "isnull",
    "nullable",
    "number_format",
    "parse_number",
    "proper_keys",
    "single_tag",
]
