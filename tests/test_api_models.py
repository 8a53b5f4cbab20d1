import pytest

from api.requests import AnalyzeRequest, DependencyEdgeRequest, FilterRequest, StatisticsRequest
from api.responses import DependencyTreeNode
from pydantic import ValidationError


def test_edge_request_requires_non_empty_names():
    req = DependencyEdgeRequest(asset="A", dependency="B")
    assert req.asset == "A"
    with pytest.raises(ValidationError):
        DependencyEdgeRequest(asset="", dependency="B")
    with pytest.raises(ValidationError):
        DependencyEdgeRequest(asset="A")


def test_roster_requests_default_to_empty():
    assert StatisticsRequest().assets == []
    assert StatisticsRequest().limit is None
    assert AnalyzeRequest(asset="A").assets == []
    with pytest.raises(ValidationError):
        StatisticsRequest(limit=-1)


def test_filter_request_needs_a_substring():
    with pytest.raises(ValidationError):
        FilterRequest(substrings=[])


def test_tree_node_model_is_recursive():
    node = DependencyTreeNode.model_validate({
        "asset": "A",
        "depth": 0,
        "dependencies": [{"asset": "B", "depth": 1, "dependencies": [], "is_circular": True}],
        "is_circular": False,
    })
    assert node.dependencies[0].is_circular is True
