"""Tests for the behavioral pattern examples."""
from typing import List

import pytest

from patternbook.domain.base.exceptions import InvalidStateTransitionError, ValidationError
from patternbook.patterns.behavioral.chain_of_responsibility import (
    Engineer,
    HelpDesk,
    SupportTicket,
    UnhandledRequestError,
    build_support_chain,
)
from patternbook.patterns.behavioral.command import (
    CommandHistory,
    DeleteCommand,
    InsertCommand,
    NothingToRedoError,
    NothingToUndoError,
    TextBuffer,
)
from patternbook.patterns.behavioral.interpreter import UnknownVariableError, parse_rpn
from patternbook.patterns.behavioral.iterator import BinaryTree
from patternbook.patterns.behavioral.mediator import ChatRoom, NotInRoomError, Participant
from patternbook.patterns.behavioral.memento import Editor, EmptyHistoryError, History
from patternbook.patterns.behavioral.observer import HeatAlert, Observer, Subject, TemperatureDisplay, WeatherStation
from patternbook.patterns.behavioral.state import Order
from patternbook.patterns.behavioral.strategy import (
    BulkDiscount,
    Checkout,
    LineItem,
    PercentageDiscount,
    RegularPricing,
    free_cheapest_item,
)
from patternbook.patterns.behavioral.template_method import (
    ActiveUsersJsonExporter,
    CsvExporter,
    JsonExporter,
)
from patternbook.patterns.behavioral.visitor import (
    DepthCounter,
    Evaluator,
    Literal,
    Printer,
    Product,
    Sum,
)


class TestChainOfResponsibility:

    @pytest.mark.parametrize("severity,handler", [(1, "HelpDesk"), (2, "Engineer"), (5, "IncidentManager")])
    def test_first_capable_handler_resolves(self, severity, handler):
        result = build_support_chain().handle(SupportTicket("ticket", severity))
        assert result == f"{handler} resolved 'ticket'"

    def test_unhandled_request_raises(self):
        with pytest.raises(UnhandledRequestError) as exc_info:
            build_support_chain().handle(SupportTicket("meteor", 9))
        assert exc_info.value.request.subject == "meteor"

    def test_set_next_returns_next_handler(self):
        head = HelpDesk()
        engineer = Engineer()
        assert head.set_next(engineer) is engineer

    def test_single_link_chain(self):
        with pytest.raises(UnhandledRequestError):
            HelpDesk().handle(SupportTicket("bug", 2))


class TestCommand:

    def test_undo_and_redo(self):
        buffer = TextBuffer()
        history = CommandHistory()
        history.run(InsertCommand(buffer, 0, "Hello"))
        history.run(InsertCommand(buffer, 5, " world"))
        history.run(DeleteCommand(buffer, 0, 6))
        assert buffer.text == "world"

        history.undo()
        assert buffer.text == "Hello world"
        history.redo()
        assert buffer.text == "world"

    def test_new_command_clears_redo(self):
        buffer = TextBuffer("abc")
        history = CommandHistory()
        history.run(InsertCommand(buffer, 3, "d"))
        history.undo()
        assert history.can_redo

        history.run(InsertCommand(buffer, 0, "x"))
        assert not history.can_redo
        with pytest.raises(NothingToRedoError):
            history.redo()

    def test_nothing_to_undo(self):
        history = CommandHistory()
        assert not history.can_undo
        with pytest.raises(NothingToUndoError, match="Nothing to undo"):
            history.undo()


class TestInterpreter:

    def test_parse_and_evaluate(self):
        expression = parse_rpn("price qty *")
        assert str(expression) == "(price * qty)"
        assert expression.interpret({"price": 2.5, "qty": 4}) == 10.0

    def test_nested_expression(self):
        expression = parse_rpn("1 2 + 3 *")
        assert str(expression) == "((1 + 2) * 3)"
        assert expression.interpret({}) == 9.0

    def test_unknown_variable(self):
        with pytest.raises(UnknownVariableError):
            parse_rpn("price vat *").interpret({"price": 1})

    @pytest.mark.parametrize("source", ["1 +", "1 2", "1 2 %", ""])
    def test_malformed_input(self, source):
        with pytest.raises(ValidationError):
            parse_rpn(source)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            parse_rpn("1 0 /").interpret({})


class TestIterator:

    @pytest.fixture
    def tree(self):
        tree = BinaryTree()
        for value in (50, 30, 70, 20, 40):
            tree.insert(value)
        return tree

    def test_in_order(self, tree):
        assert list(tree) == [20, 30, 40, 50, 70]

    def test_breadth_first(self, tree):
        assert list(tree.breadth_first()) == [50, 30, 70, 20, 40]

    def test_independent_iterators(self, tree):
        first, second = iter(tree), iter(tree)
        next(first)
        assert next(second) == 20
        assert next(first) == 30

    def test_empty_tree(self):
        assert list(BinaryTree()) == []
        assert list(BinaryTree().breadth_first()) == []


class TestMediator:

    def test_broadcast_and_private_messages(self):
        room = ChatRoom("lobby")
        alice, bob, carol = Participant("alice"), Participant("bob"), Participant("carol")
        for person in (alice, bob, carol):
            room.join(person)

        alice.say("hi")
        bob.say("psst", to="carol")

        assert "alice: hi" in bob.inbox
        assert "alice: hi" not in alice.inbox
        assert "bob: (private) psst" in carol.inbox
        assert "bob: (private) psst" not in alice.inbox

    def test_participant_must_be_in_room(self):
        room = ChatRoom("lobby")
        alice = Participant("alice")
        room.join(alice)
        room.leave(alice)

        with pytest.raises(NotInRoomError):
            alice.say("anyone?")

    def test_private_message_to_stranger(self):
        room = ChatRoom("lobby")
        alice = Participant("alice")
        room.join(alice)
        with pytest.raises(NotInRoomError):
            alice.say("hi", to="nobody")


class TestMemento:

    def test_restore_snapshots_in_reverse_order(self):
        editor = Editor()
        history = History(editor)
        history.checkpoint()
        editor.type("one")
        history.checkpoint()
        editor.type("\ntwo")
        assert editor.cursor == (1, 3)

        history.undo()
        assert editor.content == "one"
        assert editor.cursor == (0, 3)
        history.undo()
        assert editor.content == ""

        with pytest.raises(EmptyHistoryError):
            history.undo()

    def test_history_limit(self):
        editor = Editor()
        history = History(editor, limit=2)
        for text in ("a", "b", "c"):
            editor.type(text)
            history.checkpoint()
        assert len(history) == 2


class TestObserver:

    def test_observers_receive_updates(self):
        station = WeatherStation()
        display = TemperatureDisplay()
        alert = HeatAlert(threshold=30)
        station.attach(display)
        station.attach(alert)

        station.record(25.0)
        station.record(32.0)
        station.detach(alert)
        station.record(40.0)

        assert display.readings == [25.0, 32.0, 40.0]
        assert alert.alerts == ["heat alert at 32.0"]

    def test_attach_is_idempotent(self):
        subject = Subject()
        display = TemperatureDisplay()
        subject.attach(display)
        subject.attach(display)
        subject.temperature = 1.0
        assert subject.notify() == 1

    def test_failing_observer_does_not_stop_delivery(self):
        class Broken(Observer):
            def update(self, subject):
                raise RuntimeError("boom")

        station = WeatherStation()
        seen: List[float] = []
        station.attach(Broken())
        station.attach(lambda s: seen.append(s.temperature))

        station.temperature = 12.0
        assert station.notify() == 1
        assert seen == [12.0]


class TestState:

    def test_happy_path(self):
        order = Order("o-1")
        order.pay()
        order.ship()
        order.deliver()
        assert order.history == ["pending", "paid", "shipped", "delivered"]

    def test_cancel_after_payment_refunds(self):
        order = Order("o-2")
        order.pay()
        order.cancel()
        assert order.refunded
        assert order.state.name == "cancelled"

    def test_illegal_transition(self):
        order = Order("o-3")
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            order.ship()
        assert exc_info.value.current_state == "pending"
        assert order.history == ["pending"]


class TestStrategy:

    @pytest.fixture
    def cart(self):
        return [LineItem("pen", 1.50, 12), LineItem("notebook", 4.00, 3), LineItem("bag", 30.00, 1)]

    @pytest.mark.parametrize("strategy,expected", [
        (RegularPricing(), 60.0),
        (PercentageDiscount(10), 54.0),
        (BulkDiscount(min_quantity=10, unit_discount=0.5), 54.0),
        (free_cheapest_item, 58.5),
    ])
    def test_interchangeable_strategies(self, cart, strategy, expected):
        assert Checkout(strategy).total(cart) == expected

    def test_strategy_can_be_swapped(self, cart):
        checkout = Checkout(RegularPricing())
        checkout.strategy = PercentageDiscount(50)
        assert checkout.total(cart) == 30.0

    @pytest.mark.parametrize("percent", [-1, 101])
    def test_invalid_discount(self, percent):
        with pytest.raises(ValidationError):
            PercentageDiscount(percent)

    def test_empty_cart(self):
        assert Checkout(free_cheapest_item).total([]) == 0


class TestTemplateMethod:

    RECORDS = [{"name": "ada", "active": True}, {"name": "alan", "active": False}]

    def test_csv_export(self):
        assert CsvExporter().export(self.RECORDS) == "name,active\nada,True\nalan,False\n"
        assert CsvExporter().export([]) == ""

    def test_json_export(self):
        assert JsonExporter().export(self.RECORDS[:1]) == '[{"active": true, "name": "ada"}]'

    def test_hook_filters_records(self):
        assert ActiveUsersJsonExporter().export(self.RECORDS) == '[{"name": "Ada"}]'


class TestVisitor:

    @pytest.fixture
    def expression(self):
        return Product(Sum(Literal(2), Literal(3)), Literal(4))

    def test_evaluator(self, expression):
        assert expression.accept(Evaluator()) == 20.0

    def test_printer(self, expression):
        assert expression.accept(Printer()) == "(2 + 3) * 4"

    def test_depth(self, expression):
        assert expression.accept(DepthCounter()) == 3
        assert Literal(1).accept(DepthCounter()) == 1
