"""
Tests for collecting schemas from a dependency graph.
"""

from json_schema_to_docs.collector import collect_schemas, walk_schemas
from json_schema_to_docs.nodes import SchemaNode


def _node(schema_id, *dependencies):
    return SchemaNode(id=schema_id, schema={"type": "object"}, dependencies=list(dependencies))


class TestCollectSchemas:
    """Test graph collection"""

    def test_single_root(self):
        root = _node("/Foo")
        assert collect_schemas(root) == {"/Foo": root}

    def test_shared_dependency_collected_once(self):
        shared = _node("/C")
        a = _node("/A", shared)
        b = _node("/B", shared)
        root = _node("/Root", a, b)

        schemas = collect_schemas(root)

        assert sorted(schemas) == ["/A", "/B", "/C", "/Root"]
        assert schemas["/C"] is shared

    def test_first_node_wins_for_repeated_id(self):
        first = _node("/X")
        second = _node("/X", _node("/OnlyUnderSecond"))
        root = _node("/Root", first, second)

        schemas = collect_schemas(root)

        assert schemas["/X"] is first
        assert "/OnlyUnderSecond" not in schemas

    def test_cycle_terminates(self):
        a = _node("/A")
        b = _node("/B", a)
        a.dependencies.append(b)

        assert sorted(collect_schemas(a)) == ["/A", "/B"]

    def test_self_reference(self):
        a = _node("/A")
        a.dependencies.append(a)
        assert list(collect_schemas(a)) == ["/A"]

    def test_depth_first_order(self):
        c = _node("/C")
        a = _node("/A", c)
        b = _node("/B")
        root = _node("/Root", a, b)

        visited = []
        walk_schemas(root, lambda node: visited.append(node.id))

        assert visited == ["/Root", "/A", "/C", "/B"]

    def test_graph_is_not_mutated(self):
        leaf = _node("/Leaf")
        root = _node("/Root", leaf, leaf)

        collect_schemas(root)

        assert root.dependencies == [leaf, leaf]
        assert root.schema == {"type": "object"}
