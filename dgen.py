'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from pseudoenum import from_range, MaterializedSequence
from typing import Any, Dict, Optional


class Generator:
    """
    turns a schema into one generated record per create() call.

    schema forms:
      'word'                          -> faker provider by name
      ('pyint', {'min_value': 1})     -> faker provider with keyword arguments
      {'_dgen': 'choice', 'from': []} -> one of the listed values
      {'_dgen': 'literal', 'value': x}-> x unchanged
      {'field': <schema>, ...}        -> a dict built field by field
    anything else is returned as a literal.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _directive(self, config: Dict) -> Any:
        kind = config["_dgen"]
        if kind == "choice":
            options = config["from"]
            # index instead of rng.choice so mixed-type options keep their python types
            return options[int(self._rng.integers(len(options)))]
        if kind == "literal":
            if "value" not in config:
                raise ValueError("_dgen 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _dgen directive: '{kind}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_dgen" in schema:
                return self._directive(schema)
            return {field: self.create(sub) for field, sub in schema.items()}

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> MaterializedSequence:
        """generate count records once and keep them, so every pass sees the same data"""
        records = from_range(0, count).transform(lambda _: self._generator.create(self._schema))
        return MaterializedSequence(records)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
