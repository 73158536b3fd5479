"""Custom exceptions with helpful error messages."""


class TabseedError(Exception):
    """Base exception for tabseed errors."""

    pass


class InvalidDelimiterError(TabseedError):
    """Delimiter is not a comma or a tab."""

    def __init__(self, delimiter: str):
        self.delimiter = delimiter
        super().__init__(
            f"Invalid delimiter type {delimiter!r}.\n\n"
            f"Suggestions:\n"
            f"1. Use ',' for comma separated output\n"
            f"2. Use 'tab' (or a literal tab character) for tab separated output"
        )


class MissingFieldsError(TabseedError):
    """No fields were given for the table."""

    def __init__(self):
        super().__init__(
            "Must pass fields in order to build csv row(s).\n\n"
            "Suggestions:\n"
            "1. Add at least one field:\n"
            "   Field(name='id', function='autoincrement')\n"
            "2. On the command line:\n"
            "   tabseed csv --field '{\"name\": \"id\", \"function\": \"autoincrement\"}'"
        )


class MissingRowCountError(TabseedError):
    """Row count is zero or negative."""

    def __init__(self, row_count: int):
        self.row_count = row_count
        super().__init__(
            f"Must have row count (got {row_count}).\n\n"
            f"Suggestions:\n"
            f"1. Pass a positive row count, e.g. CSVOptions(row_count=100, ...)"
        )


class UnknownFunctionError(TabseedError):
    """Generator name is not registered."""

    def __init__(self, function: str):
        self.function = function
        super().__init__(
            f"Invalid function, {function} does not exist.\n\n"
            f"Suggestions:\n"
            f"1. Check function name spelling\n"
            f"2. Run 'tabseed list' to see available functions\n"
            f"3. Register a custom generator:\n"
            f"   register_generator('{function}', MyGenerator())"
        )


class GeneratorInvocationError(TabseedError):
    """A generator failed while producing a value."""

    pass


class ParameterError(GeneratorInvocationError):
    """A generator parameter is missing or could not be decoded."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Parameter '{field}': {message}")


class FieldDecodeError(TabseedError):
    """A field descriptor could not be decoded."""

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        location = f"Field #{index}: " if index is not None else ""
        super().__init__(
            f"{location}Unable to decode field descriptor: {message}\n\n"
            f"Expected a JSON object like:\n"
            f'   {{"name": "first_name", "function": "firstname", "params": {{}}}}'
        )


class EncodingError(TabseedError):
    """Writing the delimited output failed."""

    pass


class RegistryFrozenError(TabseedError):
    """Registration attempted on a frozen generator registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Cannot register generator '{name}': registry is frozen.\n\n"
            f"Suggestions:\n"
            f"1. Register custom generators before the first table is generated\n"
            f"2. Build a separate GeneratorRegistry and pass it explicitly"
        )


class InvalidLocaleError(TabseedError):
    """Faker has no provider set for the requested locale."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(
            f"Invalid Faker locale '{locale}'.\n\n"
            f"Suggestions:\n"
            f"1. Use a locale Faker ships, e.g. en_US, fr_FR, de_DE\n"
            f"2. Check [faker] locale in tabseed.toml and TABSEED_FAKER_LOCALE"
        )
