"""
Phase 2 Tests: Public API

The names documented in the package docstrings, imported the way users
import them.
"""

import shapematch
import shapematch.patterns
from shapematch import TemplateString, match, placeholder, template


class TestExports:
    def test_builders_are_functions(self):
        """Submodules must not shadow the construction functions."""
        for package in (shapematch, shapematch.patterns):
            for name in ("template", "greedy_template", "from_format", "placeholder", "match"):
                assert callable(getattr(package, name)), f"{package.__name__}.{name}"

    def test_template_builds_a_node(self):
        assert isinstance(shapematch.template("a", placeholder("x")), TemplateString)
        assert isinstance(shapematch.patterns.template("a", placeholder("x")), TemplateString)

    def test_all_names_resolve(self):
        for name in shapematch.__all__:
            assert hasattr(shapematch, name), name


class TestDocumentedExamples:
    def test_package_example(self):
        pattern = {
            "type": "message",
            "author": {"name": placeholder("author")},
            "text": template("/roll ", placeholder("dice")),
        }
        value = {"type": "message", "author": {"name": "ada"}, "text": "/roll 2d6"}
        assert match(pattern, value) == {"author": "ada", "dice": "2d6"}

    def test_patterns_example(self):
        pattern = ["point", {"x": placeholder("x"), "y": placeholder("y")}]
        assert match(pattern, ["point", {"x": 1, "y": 2, "z": 3}]) == {"x": 1, "y": 2}

        greeting = template("Hello, ", placeholder("name"), "!")
        assert match(greeting, "Hello, world!") == {"name": "world"}

    def test_readme_example(self):
        pattern = {
            "user": {"name": placeholder("name")},
            "cmd": template("/roll ", placeholder("dice")),
        }
        value = {"user": {"name": "ada", "id": 7}, "cmd": "/roll 2d6"}
        assert match(pattern, value) == {"name": "ada", "dice": "2d6"}
