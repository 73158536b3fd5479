"""Faker-based generator catalog."""

import logging
from collections.abc import Callable
from datetime import date
from typing import Any

from faker import Faker

from tabseed.exceptions import InvalidLocaleError, ParameterError
from tabseed.generators.base import FunctionGenerator, GeneratorInfo, Param
from tabseed.generators.registry import GeneratorRegistry
from tabseed.params import ParamReader

logger = logging.getLogger(__name__)

fake = Faker()


def configure_faker(locale: str | None = None, seed: int | None = None) -> Faker:
    """
    Replace the shared Faker instance.

    Args:
        locale: Faker locale (e.g. "en_US", "fr_FR"); None keeps Faker's default
        seed: Seed for reproducible output

    Returns:
        The new Faker instance

    Raises:
        InvalidLocaleError: If Faker doesn't know the locale
    """
    global fake
    try:
        instance = Faker(locale) if locale else Faker()
    except AttributeError as e:
        raise InvalidLocaleError(locale) from e
    fake = instance
    if seed is not None:
        fake.seed_instance(seed)
    logger.debug(f"Configured Faker (locale={locale}, seed={seed})")
    return fake


# Parameterless functions: name → (display, category, description, factory)
SIMPLE_FUNCTIONS: dict[str, tuple[str, str, str, Callable[[], Any]]] = {
    "name": ("Name", "person", "Full name", lambda: fake.name()),
    "firstname": ("First Name", "person", "First name", lambda: fake.first_name()),
    "lastname": ("Last Name", "person", "Last name", lambda: fake.last_name()),
    "email": ("Email", "person", "Email address", lambda: fake.email()),
    "phone": ("Phone", "person", "Phone number", lambda: fake.phone_number()),
    "ssn": ("SSN", "person", "Social security number", lambda: fake.ssn()),
    "jobtitle": ("Job Title", "company", "Job title", lambda: fake.job()),
    "company": ("Company", "company", "Company name", lambda: fake.company()),
    "street": ("Street", "address", "Street address", lambda: fake.street_address()),
    "address": ("Address", "address", "Full postal address", lambda: fake.address()),
    "city": ("City", "address", "City name", lambda: fake.city()),
    "state": ("State", "address", "State name", lambda: fake.state()),
    "country": ("Country", "address", "Country name", lambda: fake.country()),
    "zip": ("Zip", "address", "Postal code", lambda: fake.postcode()),
    "latitude": ("Latitude", "address", "Latitude", lambda: fake.latitude()),
    "longitude": ("Longitude", "address", "Longitude", lambda: fake.longitude()),
    "username": ("Username", "internet", "Username", lambda: fake.user_name()),
    "url": ("URL", "internet", "Web address", lambda: fake.url()),
    "domainname": ("Domain Name", "internet", "Domain name", lambda: fake.domain_name()),
    "ipv4address": ("IPv4 Address", "internet", "IPv4 address", lambda: fake.ipv4()),
    "ipv6address": ("IPv6 Address", "internet", "IPv6 address", lambda: fake.ipv6()),
    "macaddress": ("MAC Address", "internet", "MAC address", lambda: fake.mac_address()),
    "useragent": ("User Agent", "internet", "Browser user agent", lambda: fake.user_agent()),
    "uuid": ("UUID", "misc", "Random version 4 UUID", lambda: fake.uuid4(cast_to=None)),
    "bool": ("Boolean", "misc", "true or false", lambda: fake.pybool()),
    "color": ("Color", "misc", "Color name", lambda: fake.color_name()),
    "word": ("Word", "text", "Lorem ipsum word", lambda: fake.word()),
    "creditcardnumber": (
        "Credit Card Number", "payment", "Credit card number",
        lambda: fake.credit_card_number(),
    ),
    "currencycode": ("Currency Code", "payment", "ISO 4217 code", lambda: fake.currency_code()),
    "datetime": ("Date Time", "time", "Date and time this year", lambda: fake.date_time_this_year()),
    "timezone": ("Timezone", "time", "IANA timezone", lambda: fake.timezone()),
}


def _literal(reader: ParamReader) -> str:
    return reader.get_string("value")


def _number(reader: ParamReader) -> int:
    low, high = reader.get_int("min"), reader.get_int("max")
    if low > high:
        raise ParameterError("min", f"{low} is greater than max {high}")
    return fake.random_int(min=low, max=high)


def _float(reader: ParamReader) -> float:
    low, high = reader.get_float("min"), reader.get_float("max")
    if low > high:
        raise ParameterError("min", f"{low} is greater than max {high}")
    return round(fake.random.uniform(low, high), reader.get_int("precision"))


def _random_string(reader: ParamReader) -> str:
    choices = reader.get_string_array("strs")
    if not choices:
        raise ParameterError("strs", "must contain at least one value")
    return fake.random_element(choices)


def _password(reader: ParamReader) -> str:
    length = reader.get_int("length")
    if length < 4:
        raise ParameterError("length", "must be at least 4")
    return fake.password(length=length, special_chars=reader.get_bool("special"))


def _sentence(reader: ParamReader) -> str:
    return fake.sentence(nb_words=reader.get_int("wordcount"))


def _paragraph(reader: ParamReader) -> str:
    return fake.paragraph(nb_sentences=reader.get_int("sentencecount"))


def _date(reader: ParamReader) -> Any:
    pattern = reader.get_string("format")
    if not pattern:
        return fake.date_object()
    return fake.date(pattern=pattern)


def _date_range(reader: ParamReader) -> date:
    bounds = {}
    for key in ("startdate", "enddate"):
        value = reader.get_string(key)
        try:
            bounds[key] = date.fromisoformat(value)
        except ValueError as e:
            raise ParameterError(key, f"{value!r} is not an ISO date (YYYY-MM-DD)") from e
    if bounds["startdate"] > bounds["enddate"]:
        raise ParameterError("startdate", "must not be after enddate")
    return fake.date_between_dates(bounds["startdate"], bounds["enddate"])


def _numerify(reader: ParamReader) -> str:
    return fake.numerify(reader.get_string("str"))


def _lexify(reader: ParamReader) -> str:
    return fake.lexify(reader.get_string("str"))


def _bothify(reader: ParamReader) -> str:
    return fake.bothify(reader.get_string("str"))


_FORMAT_PARAM = [
    Param("str", "String", "string", description="Pattern to fill in"),
]

PARAM_FUNCTIONS: dict[str, tuple[Callable[[ParamReader], Any], GeneratorInfo]] = {
    "literal": (
        _literal,
        GeneratorInfo(
            display="Literal",
            category="misc",
            description="The same value on every row",
            example="hi, there",
            params=[Param("value", "Value", "string", description="Value to emit")],
        ),
    ),
    "number": (
        _number,
        GeneratorInfo(
            display="Number",
            category="number",
            description="Random integer between min and max (inclusive)",
            example="42",
            output="int",
            params=[
                Param("min", "Min", "int", default="0", description="Minimum value"),
                Param("max", "Max", "int", default="100", description="Maximum value"),
            ],
        ),
    ),
    "float": (
        _float,
        GeneratorInfo(
            display="Float",
            category="number",
            description="Random float between min and max",
            example="27.14",
            output="float",
            params=[
                Param("min", "Min", "float", default="0", description="Minimum value"),
                Param("max", "Max", "float", default="100", description="Maximum value"),
                Param("precision", "Precision", "int", default="2", description="Decimal places"),
            ],
        ),
    ),
    "randomstring": (
        _random_string,
        GeneratorInfo(
            display="Random String",
            category="misc",
            description="One value picked from the given strings",
            example="hello",
            params=[Param("strs", "Strings", "[]string", description="Values to pick from")],
        ),
    ),
    "password": (
        _password,
        GeneratorInfo(
            display="Password",
            category="internet",
            description="Random password",
            example="Dc0VYXjkWABx",
            params=[
                Param("length", "Length", "int", default="12", description="Password length"),
                Param("special", "Special", "bool", default="true",
                      description="Include special characters"),
            ],
        ),
    ),
    "sentence": (
        _sentence,
        GeneratorInfo(
            display="Sentence",
            category="text",
            description="Lorem ipsum sentence",
            example="Quia quae repellat consequatur.",
            params=[Param("wordcount", "Word Count", "int", default="5")],
        ),
    ),
    "paragraph": (
        _paragraph,
        GeneratorInfo(
            display="Paragraph",
            category="text",
            description="Lorem ipsum paragraph",
            params=[Param("sentencecount", "Sentence Count", "int", default="3")],
        ),
    ),
    "date": (
        _date,
        GeneratorInfo(
            display="Date",
            category="time",
            description="Random date, ISO formatted unless a strftime format is given",
            example="2006-01-02",
            params=[Param("format", "Format", "string", default="",
                          description="strftime pattern, e.g. %d/%m/%Y")],
        ),
    ),
    "daterange": (
        _date_range,
        GeneratorInfo(
            display="Date Range",
            category="time",
            description="Random date between startdate and enddate",
            example="1995-06-12",
            params=[
                Param("startdate", "Start Date", "string", default="1970-01-01"),
                Param("enddate", "End Date", "string", default="2030-12-31"),
            ],
        ),
    ),
    "numerify": (
        _numerify,
        GeneratorInfo(
            display="Numerify",
            category="string",
            description="Replace # with random digits",
            example="###-#### → 814-2931",
            params=_FORMAT_PARAM,
        ),
    ),
    "lexify": (
        _lexify,
        GeneratorInfo(
            display="Lexify",
            category="string",
            description="Replace ? with random letters",
            example="??-?? → kf-qe",
            params=_FORMAT_PARAM,
        ),
    ),
    "bothify": (
        _bothify,
        GeneratorInfo(
            display="Bothify",
            category="string",
            description="Replace # with digits and ? with letters",
            example="??-## → xq-07",
            params=_FORMAT_PARAM,
        ),
    ),
}


def register_catalog(registry: GeneratorRegistry) -> None:
    """Register every built-in Faker function on a registry."""
    for name, (display, category, description, factory) in SIMPLE_FUNCTIONS.items():
        info = GeneratorInfo(display=display, category=category, description=description)
        registry.register(name, FunctionGenerator(lambda _reader, f=factory: f(), info))

    for name, (func, info) in PARAM_FUNCTIONS.items():
        registry.register(name, FunctionGenerator(func, info))
