"""
schema-driven test records on top of faker.

a schema is a dict of field -> spec, where a spec is
  - a faker provider name:              'word'
  - a provider with arguments:          ('pyint', {'min_value': 1, 'max_value': 9})
  - a choice between literal values:    {'_qen_provider': 'choice', 'from': ['a', 'b']}
  - a reference to an earlier field:    {'_qen_provider': 'ref', 'key': 'id', 'format': 'user-{}'}
  - a literal:                          {'_qen_provider': 'literal', 'value': None}
  - a nested schema dict
"""

from types import SimpleNamespace
from typing import Any, Dict, Optional

import numpy as np
from faker import Faker
from foldy import from_iterable, Enumerable


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            return config["format"].format(value) if "format" in config else value

        if provider == "choice":
            # index rather than rng.choice so values keep their python type
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, context)
            record = {}
            for key, spec in schema.items():
                # refs can see the parent's fields and the ones built so far
                record[key] = self.create(spec, {**context, **record})
            return record

        if isinstance(schema, str):
            return self._call_faker(schema) if hasattr(self._fake, schema) else schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Dict, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> list:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Enumerable:
        """generate count dict records"""
        return from_iterable(self.records(count))

    def take_objects(self, count: int) -> Enumerable:
        """generate count records with attribute access"""
        return from_iterable([SimpleNamespace(**record) for record in self.records(count)])


def from_schema(schema: Dict, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
