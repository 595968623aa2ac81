"""Unit tests for BaseNode ABC and node construction."""
import pytest

from src.nodes.base import BaseNode, AbstractBlockNode
from src.nodes.split import SplitNode
from src.nodes.check_date import CheckDateNode
from src.nodes.recipient import RecipientNode
from src.nodes.delivery import DeliveryNode
from src.nodes.address import AddressNode
from src.nodes.dedication import DedicationNode
from src.nodes.report import ReportNode


class TestBaseNode:
    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseNode()

    def test_subclass_without_name_rejected(self):
        with pytest.raises(TypeError, match="must define a 'name'"):
            class Nameless(BaseNode):
                def __call__(self, state):
                    return {}

    def test_abstract_prefix_may_omit_name(self):
        class AbstractThing(BaseNode):
            pass

        assert not getattr(AbstractThing, "name", None)


class TestNodeNames:
    @pytest.mark.parametrize("node_cls, expected", [
        (SplitNode, "split"),
        (CheckDateNode, "check_date"),
        (RecipientNode, "recipient"),
        (DeliveryNode, "delivery"),
        (AddressNode, "address"),
        (DedicationNode, "dedication"),
        (ReportNode, "report"),
    ])
    def test_name(self, node_cls, expected):
        assert node_cls.name == expected


class TestBlockNodes:
    @pytest.mark.parametrize("node_cls, index", [
        (RecipientNode, 0),
        (CheckDateNode, 1),
        (DeliveryNode, 1),
        (AddressNode, 2),
        (DedicationNode, 3),
    ])
    def test_block_index(self, node_cls, index):
        assert issubclass(node_cls, AbstractBlockNode)
        assert node_cls.block_index == index

    def test_labels_default_empty(self):
        assert RecipientNode().labels == []

    def test_labels_stored(self):
        assert RecipientNode(["Nombre y número"]).labels == ["Nombre y número"]

    def test_block_missing_when_state_short(self):
        node = DedicationNode()
        assert node.block({"blocks": ["a", "b"]}) is None
        assert node.block({}) is None


class TestSplitNodeConstructor:
    def test_default_format(self):
        assert SplitNode().capture_format == "numbered"

    def test_labeled_format(self):
        assert SplitNode("labeled").capture_format == "labeled"

    def test_unknown_format_rejected(self):
        with pytest.raises(ValueError, match="Unknown capture format"):
            SplitNode("csv")
