"""DynamoDB adapter over the boto3 low-level client."""

from typing import Any, Dict, List, Mapping, Optional

import structlog
from botocore.exceptions import ClientError

from modules.gamestate.adapters.base import GameStateAdapter, NativePage
from modules.gamestate.codecs.base import (
    CURRENT_LEVEL,
    PLAYER_ID,
    RECORD_CREATED_AT,
)
from modules.gamestate.codecs.dynamodb import DynamoDBCodec
from modules.gamestate.domain.models import GameState, IdentityStrategy, QueryFilter
from modules.gamestate.pagination.strategies import KeyPagination

logger = structlog.get_logger()

KEY_ATTRIBUTES = (PLAYER_ID, RECORD_CREATED_AT)


class DynamoDBAdapter(GameStateAdapter):
    """Game state records in a DynamoDB table keyed by PlayerId/RecordCreatedAt.

    Args:
        client: boto3 DynamoDB low-level client (thread-safe, shared)
        table_name: Table holding game states
    """

    name = "dynamodb"
    identity_strategy = IdentityStrategy.LOGICAL

    def __init__(self, client: Any, table_name: str) -> None:
        self._client = client
        self._table_name = table_name
        self.codec = DynamoDBCodec()
        self.pagination = KeyPagination(KEY_ATTRIBUTES)

    @property
    def table_name(self) -> str:
        return self._table_name

    def insert(self, record: Mapping[str, Any]) -> str:
        self._client.put_item(TableName=self._table_name, Item=dict(record))
        return self.codec.platform_key(
            record[PLAYER_ID]["S"], record[RECORD_CREATED_AT]["S"]
        )

    def identity(self, entity: GameState) -> Dict[str, Any]:
        return self.codec.key(entity.player_id, entity.record_created_at)

    def update_where(self, identity: Dict[str, Any], fields: Mapping[str, Any]) -> bool:
        names = {f"#{name}": name for name in fields}
        values = {f":{name}": value for name, value in fields.items()}
        expression = "SET " + ", ".join(f"#{name} = :{name}" for name in fields)
        try:
            self._client.update_item(
                TableName=self._table_name,
                Key=identity,
                UpdateExpression=expression,
                ConditionExpression=f"attribute_exists({PLAYER_ID})",
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return False
            raise
        return True

    def delete_where(self, identity: Dict[str, Any]) -> bool:
        response = self._client.delete_item(
            TableName=self._table_name, Key=identity, ReturnValues="ALL_OLD"
        )
        return bool(response.get("Attributes"))

    def find_one(self, identity: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        response = self._client.get_item(
            TableName=self._table_name, Key=identity, ConsistentRead=True
        )
        return response.get("Item")

    def find_page(
        self,
        query_filter: QueryFilter,
        limit: int,
        start: Optional[Dict[str, Any]],
    ) -> NativePage:
        """Read one page, continuing past items dropped by the filter.

        DynamoDB applies ``Limit`` before the filter expression, so a single
        request can come back short while more matches remain. Requests are
        repeated from the last evaluated key until the page is full or the
        data is exhausted.
        """
        request = self._build_request(query_filter)
        operation = self._client.query if query_filter.player_id else self._client.scan

        records: List[Dict[str, Any]] = []
        last_key = start
        while len(records) < limit:
            kwargs = dict(request, Limit=limit - len(records))
            if last_key:
                kwargs["ExclusiveStartKey"] = last_key
            response = operation(**kwargs)
            records.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        if len(records) < limit:
            return NativePage(records=records)

        end_position = last_key or {
            name: records[-1][name] for name in KEY_ATTRIBUTES
        }
        logger.debug(
            "dynamodb_page_read",
            table=self._table_name,
            count=len(records),
            exhausted=not last_key,
        )
        return NativePage(records=records, end_position=end_position)

    def _build_request(self, query_filter: QueryFilter) -> Dict[str, Any]:
        request: Dict[str, Any] = {"TableName": self._table_name}
        values: Dict[str, Any] = {}
        names: Dict[str, str] = {}

        if query_filter.player_id:
            request["KeyConditionExpression"] = "#PlayerId = :player_id"
            request["ScanIndexForward"] = False
            names["#PlayerId"] = PLAYER_ID
            values[":player_id"] = {"S": query_filter.player_id}

        if query_filter.min_level is not None:
            request["FilterExpression"] = "#CurrentLevel >= :min_level"
            names["#CurrentLevel"] = CURRENT_LEVEL
            values[":min_level"] = {"N": str(query_filter.min_level)}

        if names:
            request["ExpressionAttributeNames"] = names
            request["ExpressionAttributeValues"] = values
        return request
