# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for MarkupNode and MarkupBuilder."""

import pytest

from genro_patterns.builders import MarkupBuilder, MarkupNode


class TestMarkupNode:
    """Tests for MarkupNode."""

    def test_none_name_raises(self):
        """None name is rejected."""
        with pytest.raises(ValueError, match="name cannot be None"):
            MarkupNode(None, 'text')

    def test_none_text_raises(self):
        """None text is rejected."""
        with pytest.raises(ValueError, match="text cannot be None"):
            MarkupNode('p', None)

    def test_render_empty_node(self):
        """Node without text or children renders open and close tags only."""
        assert MarkupNode('div').render() == '<div>\n</div>'

    def test_render_empty_node_indented(self):
        """Open and close tags share the same indentation."""
        lines = MarkupNode('div').render(indent=2).splitlines()
        assert lines == ['    <div>', '    </div>']

    def test_render_text(self):
        """Text is rendered on its own line, one level deeper."""
        assert MarkupNode('p', 'hello').render() == '<p>\n  hello\n</p>'

    def test_render_blank_text_skipped(self):
        """Whitespace-only text produces no line."""
        assert MarkupNode('p', '   ').render() == '<p>\n</p>'

    def test_render_nested_indentation(self):
        """Indentation grows by two spaces per depth level."""
        root = MarkupNode('html')
        body = MarkupNode('body')
        body.children.append(MarkupNode('p', 'deep'))
        root.children.append(body)

        assert root.render().splitlines() == [
            '<html>',
            '  <body>',
            '    <p>',
            '      deep',
            '    </p>',
            '  </body>',
            '</html>',
        ]

    def test_str_is_render(self):
        """str() renders the node."""
        node = MarkupNode('li', 'x')
        assert str(node) == node.render()

    def test_len_and_iter(self):
        """len() counts children, iteration yields them in order."""
        node = MarkupNode('ul')
        first, second = MarkupNode('li', 'a'), MarkupNode('li', 'b')
        node.children.extend([first, second])

        assert len(node) == 2
        assert list(node) == [first, second]


class TestMarkupNodeGetNode:
    """Tests for MarkupNode.get_node()."""

    @pytest.fixture
    def tree(self):
        root = MarkupNode('html')
        body = MarkupNode('body')
        body.children.append(MarkupNode('p', 'first'))
        body.children.append(MarkupNode('p', 'second'))
        root.children.append(MarkupNode('head'))
        root.children.append(body)
        return root

    def test_get_by_name(self, tree):
        """Name segments select the first matching child."""
        assert tree.get_node('body.p').text == 'first'

    def test_get_by_index(self, tree):
        """#n segments select by position."""
        assert tree.get_node('body.#1').text == 'second'
        assert tree.get_node('#0').name == 'head'

    def test_empty_path_returns_self(self, tree):
        """Empty path returns the node itself."""
        assert tree.get_node('') is tree

    def test_missing_segment_returns_none(self, tree):
        """Unknown names and out of range indexes return None."""
        assert tree.get_node('footer') is None
        assert tree.get_node('body.#5') is None
        assert tree.get_node('head.title.text') is None


class TestMarkupBuilder:
    """Tests for MarkupBuilder."""

    def test_create(self):
        """create() returns a builder with an empty root."""
        builder = MarkupBuilder.create('ul')
        assert isinstance(builder, MarkupBuilder)
        assert builder.root.name == 'ul'
        assert len(builder.root) == 0

    def test_add_child_is_fluent(self):
        """add_child() returns the same builder."""
        builder = MarkupBuilder.create('ul')
        assert builder.add_child('li', 'hello') is builder

    def test_add_child_appends_leaves(self):
        """Children are appended to the root in order."""
        builder = MarkupBuilder.create('ul')
        builder.add_child('li', 'hello').add_child('li', 'world')

        assert [child.text for child in builder.root] == ['hello', 'world']
        assert all(len(child) == 0 for child in builder.root)

    def test_add_child_none_raises(self):
        """None text passed to add_child() is rejected."""
        with pytest.raises(ValueError):
            MarkupBuilder.create('ul').add_child('li', None)

    def test_render(self):
        """render() produces the full indented tree."""
        builder = MarkupBuilder.create('ul')
        builder.add_child('li', 'hello').add_child('li', 'world')

        assert builder.render() == (
            '<ul>\n'
            '  <li>\n'
            '    hello\n'
            '  </li>\n'
            '  <li>\n'
            '    world\n'
            '  </li>\n'
            '</ul>'
        )
        assert str(builder) == builder.render()

    def test_reset(self):
        """reset() restores an empty root with the original name."""
        builder = MarkupBuilder.create('ul')
        builder.add_child('li', 'hello')
        builder.reset()

        assert builder.root.name == 'ul'
        assert len(builder.root) == 0
        assert builder.render() == '<ul>\n</ul>'

    def test_reset_then_reuse(self):
        """Builder can be reused after reset()."""
        builder = MarkupBuilder.create('ol')
        builder.add_child('li', 'old')
        builder.reset()
        builder.add_child('li', 'new')

        assert [child.text for child in builder.root] == ['new']
