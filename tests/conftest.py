"""Shared fixtures: AST anchor nodes and a fresh builder."""

import pytest

from gridcursor import Node, NodeData, new_table_builder


@pytest.fixture
def row_node():
    return Node("sex", NodeData(label="Sex"))


@pytest.fixture
def col_node():
    return Node("age", NodeData(label="Age(years)"))


@pytest.fixture
def tb(row_node, col_node):
    return new_table_builder(row_node, col_node)
