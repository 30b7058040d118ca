"""
basic_query.py — Minimal gqlrace example.

Sends one query three times in parallel and prints the first answer.

Usage:
    export GQLRACE_ENDPOINT=https://countries.trevorblades.com/graphql
    python examples/basic_query.py
"""

import logging

from pydantic import BaseModel

from gqlrace import GraphQLRequest, ModelParser, create_client


class Country(BaseModel):
    code: str
    name: str


class CountryData(BaseModel):
    country: Country | None


QUERY = """
query Country($code: ID!) {
  country(code: $code) { code name }
}
"""


async def main() -> None:
    client = create_client()
    request = GraphQLRequest(
        QUERY,
        {"code": "BR"},
        ModelParser(CountryData, data_key="data"),
    )
    result = await client.execute(request)
    print(result.value.country)


if __name__ == "__main__":
    import asyncio

    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
