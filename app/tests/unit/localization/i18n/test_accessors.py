"""Tests for localization.i18n.accessors module."""

import pytest

from localization.i18n.accessors import (
    MAX_VARIABLES,
    build_accessor,
    build_accessors,
    expected_entries,
    get_type_parameters,
    sanitize,
)
from localization.i18n.errors import AccessorNameError, GraphError, TooManyVariablesError
from tests.factories.i18n import make_graph, make_node


@pytest.mark.unit
class TestHelpers:
    """Tests for sanitize() and get_type_parameters()."""

    def test_sanitize(self):
        assert sanitize("Welcome-User") == "welcome_user"

    def test_type_parameters_in_alphabet_order(self):
        assert get_type_parameters(3) == ("A", "B", "C")

    def test_type_parameters_up_to_limit(self):
        letters = get_type_parameters(MAX_VARIABLES)
        assert len(letters) == 26
        assert letters[-1] == "Z"

    def test_too_many_type_parameters(self):
        with pytest.raises(TooManyVariablesError) as exc_info:
            get_type_parameters(MAX_VARIABLES + 1, "phone-book")

        assert exc_info.value.entry == "phone-book"
        assert exc_info.value.count == 27
        assert exc_info.value.limit == 26


@pytest.mark.unit
class TestBuildAccessor:
    """Tests for build_accessor()."""

    def test_no_variables(self):
        accessor = build_accessor(make_node("greeting", category="common"))

        assert accessor.method_name == "common_greeting"
        assert accessor.entry == "greeting"
        assert accessor.parameters == ()

    def test_name_is_sanitized(self):
        accessor = build_accessor(make_node("Welcome-User", category="Main-Menu"))
        assert accessor.method_name == "main_menu_welcome_user"

    def test_parameters_follow_sorted_variables(self):
        accessor = build_accessor(make_node("inbox", variables={"count", "user-name"}))

        assert [parameter.name for parameter in accessor.parameters] == ["count", "user_name"]
        assert accessor.variables == ("count", "user-name")
        assert [parameter.type_parameter for parameter in accessor.parameters] == ["A", "B"]

    def test_keyword_variable_gets_suffix(self):
        accessor = build_accessor(make_node("course", variables={"class", "self"}))
        assert [parameter.name for parameter in accessor.parameters] == ["class_", "self_"]

    def test_variables_colliding_after_sanitize(self):
        with pytest.raises(AccessorNameError):
            build_accessor(make_node("clash", variables={"user-name", "user_name"}))

    def test_too_many_variables(self):
        variables = {f"v{index}" for index in range(MAX_VARIABLES + 1)}

        with pytest.raises(TooManyVariablesError):
            build_accessor(make_node("phone-book", variables=variables))

    def test_exactly_max_variables(self):
        variables = {f"v{index:02d}" for index in range(MAX_VARIABLES)}
        accessor = build_accessor(make_node("form", variables=variables))
        assert len(accessor.parameters) == MAX_VARIABLES

    def test_invalid_category(self):
        with pytest.raises(AccessorNameError):
            build_accessor(make_node("greeting", category="my catalog"))

    def test_unresolved_node(self):
        with pytest.raises(GraphError, match="unresolved"):
            build_accessor(make_node("a", dependencies={"b"}))


@pytest.mark.unit
class TestBuildAccessors:
    """Tests for build_accessors() and expected_entries()."""

    def test_terms_are_not_exposed(self):
        graph = make_graph(
            make_node("about", variables={"case"}),
            make_node("brand", variables={"case"}, term=True),
        )

        accessors = build_accessors(graph)

        assert [accessor.method_name for accessor in accessors] == ["messages_about"]

    def test_sorted_by_method_name(self):
        graph = make_graph(make_node("zeta"), make_node("alpha"), make_node("mid"))

        names = [accessor.method_name for accessor in build_accessors(graph)]

        assert names == ["messages_alpha", "messages_mid", "messages_zeta"]

    def test_method_name_collision(self):
        graph = make_graph(make_node("a-b"), make_node("a_b"))

        with pytest.raises(AccessorNameError, match="messages_a_b"):
            build_accessors(graph)

    def test_reserved_name(self):
        graph = make_graph(make_node("errors", category="handle"))

        with pytest.raises(AccessorNameError, match="reserved"):
            build_accessors(graph, reserved={"handle_errors"})

    def test_expected_entries(self):
        graph = make_graph(
            make_node("b"),
            make_node("a"),
            make_node("brand", term=True),
        )

        assert expected_entries(graph.values()) == (("a", "b"), ("brand",))
