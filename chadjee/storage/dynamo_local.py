import json
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from chadjee.models.progress import StudyStreak
from chadjee.models.records import StudySession, TestRecord
from chadjee.storage.base import StorageBackend


def _convert_floats(obj):
    """Recursively convert floats to Decimal for DynamoDB."""
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {k: _convert_floats(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_floats(i) for i in obj]
    return obj


def _convert_decimals(obj):
    """Recursively convert Decimals back to float/int."""
    if isinstance(obj, Decimal):
        if obj == int(obj):
            return int(obj)
        return float(obj)
    if isinstance(obj, dict):
        return {k: _convert_decimals(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_convert_decimals(i) for i in obj]
    return obj


_TABLE_DEFS = {
    "StudySessions": {"pk": "user_id", "sk": "id"},
    "TestRecords": {"pk": "user_id", "sk": "id"},
    "StreakState": {"pk": "user_id"},
}


class DynamoLocalStorage(StorageBackend):
    def __init__(self, endpoint_url: str = "http://localhost:8000", region: str = "us-east-1"):
        self._resource = boto3.resource(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id="local",
            aws_secret_access_key="local",
        )
        self._ensure_tables()

    def _ensure_tables(self):
        existing = {t.name for t in self._resource.tables.all()}
        for table_name, keys in _TABLE_DEFS.items():
            if table_name in existing:
                continue
            key_schema = [{"AttributeName": keys["pk"], "KeyType": "HASH"}]
            attr_defs = [{"AttributeName": keys["pk"], "AttributeType": "S"}]
            if "sk" in keys:
                key_schema.append({"AttributeName": keys["sk"], "KeyType": "RANGE"})
                attr_defs.append({"AttributeName": keys["sk"], "AttributeType": "S"})
            self._resource.create_table(
                TableName=table_name,
                KeySchema=key_schema,
                AttributeDefinitions=attr_defs,
                BillingMode="PAY_PER_REQUEST",
            )

    def _table(self, name: str):
        return self._resource.Table(name)

    def _to_item(self, user_id: str, model) -> dict:
        data = json.loads(model.model_dump_json())
        data["user_id"] = user_id
        return _convert_floats(data)

    def _query_user(self, table_name: str, user_id: str) -> list[dict]:
        resp = self._table(table_name).query(KeyConditionExpression=Key("user_id").eq(user_id))
        items = [_convert_decimals(i) for i in resp.get("Items", [])]
        for item in items:
            item.pop("user_id", None)
        return items

    # --- StudySession ---

    def list_sessions(self, user_id: str) -> list[StudySession]:
        sessions = [StudySession.model_validate(i) for i in self._query_user("StudySessions", user_id)]
        return sorted(sessions, key=lambda s: s.start_time)

    def save_session(self, user_id: str, session: StudySession) -> None:
        self._table("StudySessions").put_item(Item=self._to_item(user_id, session))

    def delete_session(self, user_id: str, session_id: str) -> None:
        self._table("StudySessions").delete_item(Key={"user_id": user_id, "id": session_id})

    # --- TestRecord ---

    def list_test_records(self, user_id: str) -> list[TestRecord]:
        records = [TestRecord.model_validate(i) for i in self._query_user("TestRecords", user_id)]
        return sorted(records, key=lambda r: r.date)

    def save_test_record(self, user_id: str, record: TestRecord) -> None:
        self._table("TestRecords").put_item(Item=self._to_item(user_id, record))

    def delete_test_record(self, user_id: str, record_id: str) -> None:
        self._table("TestRecords").delete_item(Key={"user_id": user_id, "id": record_id})

    # --- StudyStreak ---

    def get_streak(self, user_id: str) -> StudyStreak | None:
        try:
            resp = self._table("StreakState").get_item(Key={"user_id": user_id})
        except ClientError:
            return None
        item = resp.get("Item")
        if not item:
            return None
        data = _convert_decimals(item)
        data.pop("user_id", None)
        return StudyStreak.model_validate(data)

    def save_streak(self, user_id: str, streak: StudyStreak) -> None:
        self._table("StreakState").put_item(Item=self._to_item(user_id, streak))
