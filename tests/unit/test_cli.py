"""Unit tests for the operator command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from topic_store import cli
from topic_store.bootstrap.topic_store import build_topic_store
from topic_store.config.topic_store_config import TEST_TOPIC_STORE_CONFIG
from topic_store.domain.errors.storage import StorageConnectionError
from topic_store.domain.events.event_schema import EventSchema
from topic_store.infrastructure.stubs.object_store_stub import ObjectStoreStub


@pytest.fixture
def shared_store(
    object_store: ObjectStoreStub, monkeypatch: pytest.MonkeyPatch
) -> ObjectStoreStub:
    """Route every store the CLI opens to one in-memory object store."""
    monkeypatch.setattr(
        "topic_store.bootstrap.topic_store.create_object_store",
        lambda config: object_store,
    )
    return object_store


async def _run(argv: list[str], stdin: str = "") -> tuple[int, str]:
    out = io.StringIO()
    args = cli.build_parser().parse_args(argv)
    code = await cli.run(args, TEST_TOPIC_STORE_CONFIG, stdin=io.StringIO(stdin), out=out)
    return code, out.getvalue()


class TestParser:
    def test_command_is_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    def test_replay_flags(self) -> None:
        args = cli.build_parser().parse_args(["replay", "payments", "--show-skipped"])
        assert args.topic == "payments"
        assert args.show_skipped is True


class TestCommands:
    @pytest.mark.asyncio
    async def test_publish_from_stdin_prints_object_name(
        self, shared_store: ObjectStoreStub
    ) -> None:
        code, output = await _run(["publish", "payments", "-"], stdin='{"amount": 10}')

        assert code == cli.EXIT_OK
        assert shared_store.object_names("payments") == [output.strip()]

    @pytest.mark.asyncio
    async def test_publish_from_file(
        self, shared_store: ObjectStoreStub, tmp_path: Path
    ) -> None:
        document = tmp_path / "event.json"
        document.write_text('{"amount": 10}', encoding="utf-8")

        code, _ = await _run(["publish", "payments", str(document)])

        assert code == cli.EXIT_OK
        assert shared_store.upload_count == 1

    @pytest.mark.asyncio
    async def test_publish_rejects_invalid_json(self, shared_store: ObjectStoreStub) -> None:
        code, _ = await _run(["publish", "payments", "-"], stdin="{not json")

        assert code == cli.EXIT_USAGE_ERROR
        assert shared_store.upload_count == 0

    @pytest.mark.asyncio
    async def test_replay_prints_one_line_per_event(
        self, shared_store: ObjectStoreStub
    ) -> None:
        shared_store.put_raw("payments", "2026/01/15/10/30/a.json", b'{"seq": 1}')
        shared_store.put_raw("payments", "2026/01/15/10/30/b.json", b"{oops")

        code, output = await _run(["replay", "payments"])

        assert code == cli.EXIT_OK
        assert [json.loads(line) for line in output.splitlines()] == [{"seq": 1}]

    @pytest.mark.asyncio
    async def test_replay_can_show_skipped_objects(
        self, shared_store: ObjectStoreStub
    ) -> None:
        shared_store.put_raw("payments", "2026/01/15/10/30/b.json", b"{oops")

        _, output = await _run(["replay", "payments", "--show-skipped"])

        assert output.startswith("# skipped 2026/01/15/10/30/b.json: JSONDecodeError")

    @pytest.mark.asyncio
    async def test_configuration_lists_created_topics(
        self, shared_store: ObjectStoreStub
    ) -> None:
        container = build_topic_store(TEST_TOPIC_STORE_CONFIG, object_store=shared_store)
        await container.catalog.create_topic(
            "payments",
            "Payment events",
            [EventSchema("Deposit", {}), EventSchema("Withdrawal", {})],
        )

        code, output = await _run(["configuration"])

        assert code == cli.EXIT_OK
        fields = output.strip().split("\t")
        assert fields[1:] == ["payments", "v1", "Deposit,Withdrawal"]

    @pytest.mark.asyncio
    async def test_storage_failure_exits_with_error(
        self, shared_store: ObjectStoreStub, capsys: pytest.CaptureFixture[str]
    ) -> None:
        shared_store.fail_container_checks_with(StorageConnectionError("unreachable"))

        code, _ = await _run(["replay", "payments"])

        assert code == cli.EXIT_STORAGE_ERROR
        assert "unreachable" in capsys.readouterr().err


class TestMain:
    def test_main_runs_against_memory_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOPIC_STORE_BACKEND", "memory")
        monkeypatch.setenv("TOPIC_STORE_ENVIRONMENT", "development")

        assert cli.main(["replay", "payments"]) == cli.EXIT_OK

    def test_invalid_configuration_is_a_usage_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TOPIC_STORE_BACKEND", "s3")

        assert cli.main(["replay", "payments"]) == cli.EXIT_USAGE_ERROR

    def test_memory_backend_does_not_persist_between_runs(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        monkeypatch.setenv("TOPIC_STORE_BACKEND", "memory")
        monkeypatch.setenv("TOPIC_STORE_ENVIRONMENT", "development")
        event_file = tmp_path / "event.json"
        event_file.write_text('{"amount": 10}', encoding="utf-8")

        assert cli.main(["publish", "payments", str(event_file)]) == cli.EXIT_OK
        capsys.readouterr()

        assert cli.main(["replay", "payments"]) == cli.EXIT_OK
        assert capsys.readouterr().out == ""
