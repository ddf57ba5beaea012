from __future__ import annotations

"""Record (list-of-dicts) encoding into a numeric matrix.

Each field is encoded according to the type of its value in the first record:

- str     -> one-hot block, columns in order of first appearance
- bool    -> 1 / 0
- number  -> standardised ``(v - mean) / std`` with the sample std (ddof=1)
- other   -> passed through unchanged

Label fields are encoded the same way and appended after the feature fields.
The returned decoders are plain JSON-friendly dicts, so an encoding can be
stored next to a model and reversed later with :meth:`OneHotEncoder.decode`.
"""

import numbers
from typing import Any, Dict, List, Optional, Sequence, TypedDict

import numpy as np

from boostlab.core.errors import InvalidInput


class FieldDecoder(TypedDict, total=False):
    key: str
    type: str
    offset: int
    lookup_table: List[Any]
    mean: float
    std: float


def _field_type(value: Any) -> str:
    if isinstance(value, (bool, np.bool_)):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, numbers.Number):
        return "number"
    return "raw"


def _sample_std(values: np.ndarray, mean: float) -> float:
    if values.shape[0] < 2:
        return 1.0
    std = float(np.sqrt(np.sum((values - mean) ** 2) / (values.shape[0] - 1)))
    # a constant column has nothing to scale
    return std if std > 0 and np.isfinite(std) else 1.0


class OneHotEncoder:
    """Encode heterogeneous records into rows of numbers, and back."""

    def encode(
        self,
        data: Sequence[Dict[str, Any]],
        *,
        data_keys: Optional[Sequence[str]] = None,
        label_keys: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        """
        Returns ``{"data": rows, "decoders": decoders}`` where every row holds
        the encoded feature fields followed by the encoded label fields.
        Without ``data_keys`` every non-label key of the first record is a
        feature.
        """
        if len(data) < 1:
            raise InvalidInput("data cannot be empty!")

        label_keys = list(label_keys or [])
        if data_keys is None:
            data_keys = [k for k in data[0].keys() if k not in label_keys]
        data_keys = list(data_keys)

        for i, record in enumerate(data):
            for key in data_keys + label_keys:
                if key not in record:
                    raise InvalidInput(f"Cannot find {key!r} in record {i}")

        decoders: List[FieldDecoder] = []
        columns: List[np.ndarray] = []
        for key in data_keys + label_keys:
            block, decoder = self._encode_field(key, data)
            columns.append(block)
            decoders.append(decoder)

        matrix = np.hstack(columns) if columns else np.empty((len(data), 0))
        return {"data": matrix.tolist(), "decoders": decoders}

    def _encode_field(self, key: str, data: Sequence[Dict[str, Any]]):
        values = [record[key] for record in data]
        kind = _field_type(values[0])

        if kind == "string":
            for v in values:
                if not isinstance(v, str):
                    raise InvalidInput(f"Field {key!r} mixes strings with {type(v).__name__}")
            lookup_table = list(dict.fromkeys(values))
            index = {v: i for i, v in enumerate(lookup_table)}
            block = np.zeros((len(values), len(lookup_table)), dtype=np.float64)
            for row, v in enumerate(values):
                block[row, index[v]] = 1.0
            decoder: FieldDecoder = {
                "key": key,
                "type": kind,
                "offset": len(lookup_table),
                "lookup_table": lookup_table,
            }
            return block, decoder

        if kind == "boolean":
            block = np.array([[1.0 if v else 0.0] for v in values], dtype=np.float64)
            return block, {"key": key, "type": kind, "offset": 1}

        if kind == "number":
            try:
                arr = np.asarray(values, dtype=np.float64)
            except (TypeError, ValueError) as exc:
                raise InvalidInput(f"Field {key!r} is not numeric in every record: {exc}") from exc
            # None and NaN both land here
            if not np.all(np.isfinite(arr)):
                raise InvalidInput(f"Field {key!r} contains missing or non-finite values")
            mean = float(np.mean(arr))
            std = _sample_std(arr, mean)
            block = ((arr - mean) / std)[:, None]
            return block, {"key": key, "type": kind, "offset": 1, "mean": mean, "std": std}

        block = np.empty((len(values), 1), dtype=object)
        block[:, 0] = values
        return block, {"key": key, "type": kind, "offset": 1}

    def decode(self, encoded: Sequence[Sequence[Any]], decoders: Sequence[FieldDecoder]) -> List[Dict[str, Any]]:
        """Decode the encoded rows back into their original records."""
        return [self._decode_row(row, decoders) for row in encoded]

    def _decode_row(self, row: Sequence[Any], decoders: Sequence[FieldDecoder]) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        i = 0
        for decoder in decoders:
            offset = int(decoder.get("offset", 1))
            if i + offset > len(row):
                raise InvalidInput(f"Row of length {len(row)} is too short for the given decoders")
            kind = decoder["type"]
            if kind == "string":
                block = list(row[i:i + offset])
                record[decoder["key"]] = decoder["lookup_table"][int(np.argmax(block))]
            elif kind == "boolean":
                record[decoder["key"]] = bool(row[i])
            elif kind == "number":
                record[decoder["key"]] = decoder["std"] * float(row[i]) + decoder["mean"]
            else:
                record[decoder["key"]] = row[i]
            i += offset
        return record


__all__ = ["FieldDecoder", "OneHotEncoder"]
