"""In-memory fake of the boto3 DynamoDB low-level client.

Implements the subset of calls the DynamoDB adapter makes, with DynamoDB's
paging semantics: ``Limit`` bounds the items *evaluated* before the filter
expression is applied, and ``LastEvaluatedKey`` is returned while unread
items remain.
"""

import copy
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from botocore.exceptions import ClientError

PARTITION_KEY = "PlayerId"
SORT_KEY = "RecordCreatedAt"


def _key_of(item: Dict[str, Any]) -> Tuple[str, str]:
    return item[PARTITION_KEY]["S"], item[SORT_KEY]["S"]


def _number(value: Dict[str, Any]) -> int:
    return int(value["N"])


class FakeDynamoDBClient:
    """Fake DynamoDB client storing items in a dict keyed by primary key.

    Failures can be queued per method with ``fail_next``; every call is
    recorded in ``calls`` as ``(method, kwargs)``.
    """

    def __init__(self):
        self.items: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self._failures: Dict[str, List[Exception]] = defaultdict(list)

    def fail_next(self, method: str, error: Exception, times: int = 1) -> None:
        self._failures[method].extend([error] * times)

    def _record(self, method: str, kwargs: Dict[str, Any]) -> None:
        self.calls.append((method, copy.deepcopy(kwargs)))
        if self._failures[method]:
            raise self._failures[method].pop(0)

    def calls_to(self, method: str) -> List[Dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == method]

    def put_item(self, **kwargs):
        self._record("put_item", kwargs)
        item = copy.deepcopy(kwargs["Item"])
        self.items[_key_of(item)] = item
        return {}

    def get_item(self, **kwargs):
        self._record("get_item", kwargs)
        item = self.items.get(_key_of(kwargs["Key"]))
        return {"Item": copy.deepcopy(item)} if item else {}

    def update_item(self, **kwargs):
        self._record("update_item", kwargs)
        key = _key_of(kwargs["Key"])
        if key not in self.items:
            raise ClientError(
                {
                    "Error": {
                        "Code": "ConditionalCheckFailedException",
                        "Message": "The conditional request failed",
                    }
                },
                "UpdateItem",
            )
        names = kwargs["ExpressionAttributeNames"]
        values = kwargs["ExpressionAttributeValues"]
        assignments = kwargs["UpdateExpression"].removeprefix("SET ").split(", ")
        for assignment in assignments:
            name, value = (part.strip() for part in assignment.split("="))
            self.items[key][names[name]] = copy.deepcopy(values[value])
        return {}

    def delete_item(self, **kwargs):
        self._record("delete_item", kwargs)
        old = self.items.pop(_key_of(kwargs["Key"]), None)
        if old and kwargs.get("ReturnValues") == "ALL_OLD":
            return {"Attributes": old}
        return {}

    def query(self, **kwargs):
        self._record("query", kwargs)
        player_id = kwargs["ExpressionAttributeValues"][":player_id"]["S"]
        candidates = [
            item for key, item in self.items.items() if key[0] == player_id
        ]
        candidates.sort(
            key=lambda item: item[SORT_KEY]["S"],
            reverse=not kwargs.get("ScanIndexForward", True),
        )
        return self._read(candidates, kwargs)

    def scan(self, **kwargs):
        self._record("scan", kwargs)
        candidates = [self.items[key] for key in sorted(self.items)]
        return self._read(candidates, kwargs)

    def _read(self, candidates: List[Dict[str, Any]], kwargs: Dict[str, Any]):
        start_key: Optional[Dict[str, Any]] = kwargs.get("ExclusiveStartKey")
        if start_key:
            position = [_key_of(item) for item in candidates].index(_key_of(start_key))
            candidates = candidates[position + 1 :]

        limit = kwargs.get("Limit", len(candidates))
        evaluated = candidates[:limit]
        min_level = kwargs.get("ExpressionAttributeValues", {}).get(":min_level")
        if min_level is not None:
            matched = [
                item
                for item in evaluated
                if _number(item["CurrentLevel"]) >= _number(min_level)
            ]
        else:
            matched = evaluated

        response: Dict[str, Any] = {
            "Items": copy.deepcopy(matched),
            "Count": len(matched),
            "ScannedCount": len(evaluated),
        }
        if len(candidates) > limit:
            last = evaluated[-1]
            response["LastEvaluatedKey"] = {
                PARTITION_KEY: last[PARTITION_KEY],
                SORT_KEY: last[SORT_KEY],
            }
        return response
