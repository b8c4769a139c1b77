"""
Tests for dump/retrieval.

Covers:
- dump() of everything
- dump(name) of one logger
- dump('Prefix::*') wildcard selection and ordering
- No-op cases (unknown name, non-string, zero wildcard matches)
- Independence from filtering, idempotence
"""

import pytest

from scopelog.context import LogContext
from scopelog.dump import wildcard_matcher


@pytest.fixture
def received() -> list:
    return []


@pytest.fixture
def ctx(received) -> LogContext:
    return LogContext({"out": received.append}, clock=lambda: "12:00:00")


class TestDumpAll:
    def test_dumps_all_in_emission_order(self, ctx, received):
        ctx.get_logger("A").info("one")
        ctx.get_logger("B").warn("two")
        received.clear()

        assert ctx.dump() is True
        assert received == [
            ["12:00:00 [A] INFO one", "12:00:00 [B] WARN two"],
        ]

    def test_empty_store_dispatches_empty_batch(self, ctx, received):
        ctx.dump()
        assert received == [[]]


class TestDumpByName:
    def test_exact_logger(self, ctx, received):
        a = ctx.get_logger("A")
        b = ctx.get_logger("B")
        a.info("a1")
        b.info("b1")
        a.error("a2")
        received.clear()

        ctx.dump("A")
        assert received == [["12:00:00 [A] INFO a1", "12:00:00 [A] ERROR a2"]]

    def test_logger_without_lines(self, ctx, received):
        ctx.get_logger("Idle")
        ctx.dump("Idle")
        assert received == [[]]

    def test_single_line_is_still_a_batch(self, ctx, received):
        ctx.get_logger("A").info("one")
        received.clear()

        ctx.dump("A")
        assert received == [["12:00:00 [A] INFO one"]]

    def test_unknown_name_dispatches_nothing(self, ctx, received):
        ctx.get_logger("A").info("x")
        received.clear()
        assert ctx.dump("NoSuchLogger") is False
        assert received == []

    @pytest.mark.parametrize("name", [None, 42, ["A"]])
    def test_non_string_is_noop(self, ctx, received, name):
        ctx.get_logger("A").info("x")
        received.clear()
        assert ctx.dump(name) is False
        assert received == []


class TestDumpWildcard:
    def test_interleaved_namespaces(self, ctx, received):
        ctx.get_logger("A::x").info("first")
        ctx.get_logger("B::z").info("other")
        ctx.get_logger("A::y").info("second")
        received.clear()

        assert ctx.dump("A::*") is True
        assert received == [
            ["12:00:00 [A::x] INFO first", "12:00:00 [A::y] INFO second"],
        ]

    def test_prefix_must_match_whole_segment(self, ctx, received):
        ctx.get_logger("Controller::people").info("yes")
        ctx.get_logger("ControllerX::people").info("no")
        received.clear()

        ctx.dump("Controller::*")
        assert received == [["12:00:00 [Controller::people] INFO yes"]]

    def test_quoted_tag_in_message_does_not_match(self, ctx, received):
        ctx.get_logger("B::z").info("[A::x] looks like a tag")
        received.clear()
        assert ctx.dump("A::*") is False
        assert received == []

    def test_zero_matches_dispatches_nothing(self, ctx, received):
        ctx.get_logger("B::z").info("x")
        received.clear()
        assert ctx.dump("A::*") is False
        assert received == []

    def test_works_without_time_prefix(self, received):
        ctx = LogContext({"out": received.append, "showTime": False})
        ctx.get_logger("A::x").debug("hi")
        received.clear()
        ctx.dump("A::*")
        assert received == [["[A::x] DEBUG hi"]]

    def test_clock_with_spaces(self, received):
        ctx = LogContext({"out": received.append}, clock=lambda: "12:00:00 PM")
        ctx.get_logger("A::x").info("late")
        ctx.get_logger("B::z").info("[A::y] quoted")
        received.clear()

        assert ctx.dump("A::*") is True
        assert received == [["12:00:00 PM [A::x] INFO late"]]

    def test_segment_is_literal_text(self, ctx, received):
        ctx.get_logger("a.b::x").info("dotted")
        ctx.get_logger("aXb::x").info("not dotted")
        received.clear()
        ctx.dump("a.b::*")
        assert received == [["12:00:00 [a.b::x] INFO dotted"]]

    def test_nested_namespace_pattern(self, ctx, received):
        ctx.get_logger("A::b::c").info("deep")
        ctx.get_logger("A::d").info("shallow")
        received.clear()
        ctx.dump("A::b::*")
        assert received == [["12:00:00 [A::b::c] INFO deep"]]

    def test_exact_name_wins_over_wildcard_shape(self, ctx, received):
        ctx.get_logger("A::*").info("literal")
        ctx.get_logger("A::x").info("other")
        received.clear()
        ctx.dump("A::*")
        assert received == [["12:00:00 [A::*] INFO literal"]]


class TestDumpProperties:
    def test_suppressed_lines_are_dumped(self, ctx, received):
        ctx.config(rootLogger="NONE")
        ctx.get_logger("A").error("hidden")
        assert received == []

        ctx.dump("A")
        assert received == [["12:00:00 [A] ERROR hidden"]]

    def test_idempotent(self, ctx, received):
        ctx.get_logger("A::x").info("one")
        ctx.get_logger("A::y").info("two")
        received.clear()

        ctx.dump("A::*")
        ctx.dump("A::*")
        assert received[0] == received[1]


class TestWildcardMatcher:
    def test_with_and_without_clock(self):
        matches = wildcard_matcher("A")
        assert matches("10:11:12 [A::x] INFO m")
        assert matches("[A::x] INFO m")

    def test_rejects_other_namespaces(self):
        matches = wildcard_matcher("A")
        assert not matches("10:11:12 [AB::x] INFO m")
        assert not matches("10:11:12 [B::x] INFO [A::x] m")
        assert not matches("[A] INFO m")

    def test_multi_word_clock(self):
        matches = wildcard_matcher("A")
        assert matches("12:00:00 PM [A::x] INFO m")
        assert not matches("12:00:00 PM [B::x] INFO [A::x] m")
