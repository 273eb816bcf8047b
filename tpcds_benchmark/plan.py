# SPDX-FileCopyrightText: Copyright (c) 2025-2026, NVIDIA CORPORATION.
# SPDX-License-Identifier: Apache-2.0

"""Estimate the input size of a query from its analyzed logical plan.

The estimate walks the plan, collects the distinct base tables it references and adds up
their row counts. It is only used to label benchmark output, so tables that were not
registered by the harness simply count as zero.
"""

from dataclasses import dataclass, field
from enum import Enum


class RelationKind(str, Enum):
    ALIASED_RELATION = "aliased_relation"
    BASE_RELATION = "base_relation"
    CATALOG_RELATION = "catalog_relation"
    OTHER = "other"


@dataclass(frozen=True)
class PlanNode:
    kind: RelationKind
    table_name: str = None
    children: tuple = field(default_factory=tuple)

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()


def referenced_tables(plan):
    tables = set()
    for node in plan.walk():
        if node.kind in (RelationKind.ALIASED_RELATION, RelationKind.BASE_RELATION, RelationKind.CATALOG_RELATION):
            tables.add(node.table_name)
    return tables


def estimate_query_size(plan, table_sizes):
    return sum(table_sizes.get(table, 0) for table in referenced_tables(plan))


def analyzed_plan(df):
    return from_jvm_plan(df._jdf.queryExecution().analyzed())


def from_jvm_plan(jplan):
    """Convert a py4j handle on a Catalyst LogicalPlan into a PlanNode tree."""
    node_type = _simple_class_name(jplan)
    children = tuple(from_jvm_plan(child) for child in _jvm_children(jplan))

    if node_type == "SubqueryAlias" and _wraps_logical_relation(jplan):
        return PlanNode(RelationKind.ALIASED_RELATION, str(jplan.alias()), children)

    if node_type == "LogicalRelation":
        catalog_table = jplan.catalogTable()
        if catalog_table.isDefined():
            return PlanNode(RelationKind.BASE_RELATION, str(catalog_table.get().identifier().table()), children)

    if node_type == "HiveTableRelation":
        return PlanNode(RelationKind.CATALOG_RELATION, str(jplan.tableMeta().identifier().table()), children)

    return PlanNode(RelationKind.OTHER, children=children)


def _simple_class_name(jobj):
    return jobj.getClass().getSimpleName()


def _jvm_children(jplan):
    children = jplan.children()
    return [children.apply(i) for i in range(children.size())]


def _wraps_logical_relation(jalias):
    child = jalias.child()
    # Temporary views created from a DataFrame put a View node between the alias and the relation.
    while _simple_class_name(child) == "View":
        child = child.child()
    return _simple_class_name(child) == "LogicalRelation"
