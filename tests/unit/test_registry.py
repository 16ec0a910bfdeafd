"""Unit tests for SemanticElementRegistry and ElementDefinition."""

import pytest

from semantic_dom import (
    BlockContainerElement,
    ConfigurationError,
    ElementDefinition,
    InvalidElementDefinitionError,
    SemanticContainerElement,
    SemanticElement,
    SemanticElementRegistry,
    UnregisteredElementError,
    define,
)


class TestElementDefinition:
    """Test cases for ElementDefinition."""

    def test_reads_tag_and_voidness_from_instance(self, callout_class, badge_class):
        callout = ElementDefinition(callout_class)
        badge = ElementDefinition(badge_class)

        assert callout.tag_name == 'x-callout'
        assert not callout.is_void_type
        assert badge.tag_name == 'x-badge'
        assert badge.is_void_type

    def test_constructs_one_sample_instance(self, callout_class):
        calls = []

        def factory():
            calls.append(1)
            return callout_class()

        definition = define(factory, callout_class)

        assert len(calls) == 1
        assert definition.element_class is callout_class

        definition.create()
        assert len(calls) == 2

    def test_create_returns_fresh_instances(self, callout_class):
        definition = define(callout_class)
        assert definition.create() is not definition.create()

    def test_rejects_non_semantic_elements(self):
        with pytest.raises(InvalidElementDefinitionError) as exc_info:
            ElementDefinition(lambda: BlockContainerElement('div'))

        assert isinstance(exc_info.value, ConfigurationError)
        assert 'BlockContainerElement' in str(exc_info.value)

    def test_rejects_semantic_element_without_shape(self):
        class Bare(SemanticElement):
            tag = "x-bare"

        with pytest.raises(InvalidElementDefinitionError) as exc_info:
            ElementDefinition(Bare)

        assert 'Bare' in str(exc_info.value)
        assert exc_info.value.constructor is Bare


class TestSemanticElementRegistry:
    """Test cases for SemanticElementRegistry."""

    def test_register_and_lookup(self, callout_class):
        registry = SemanticElementRegistry()
        definition = registry.register(callout_class)

        assert registry.lookup('x-callout') is definition
        assert 'x-callout' in registry
        assert len(registry) == 1

    def test_lookup_is_case_insensitive(self, registry):
        assert registry.lookup('X-CALLOUT') is registry.lookup('x-callout')
        assert 'X-Badge' in registry

    def test_lookup_unknown_returns_none(self, registry):
        assert registry.lookup('div') is None
        assert registry.lookup('') is None
        assert 42 not in registry

    def test_reregistering_a_tag_replaces_the_definition(self):
        class First(SemanticContainerElement):
            tag = 'x'

        class Second(SemanticContainerElement):
            tag = 'x'

        registry = SemanticElementRegistry()
        registry.register(First)
        second = registry.register(Second)

        assert registry.lookup('x') is second
        assert registry.lookup('x').element_class is Second
        assert len(registry) == 1

    def test_tag_name_for_type(self, registry, callout_class, badge_class):
        assert registry.tag_name_for_type(callout_class) == 'x-callout'
        assert registry.tag_name_for_type(badge_class) == 'x-badge'

    def test_tag_name_for_unregistered_type_raises(self, registry, custom_class):
        with pytest.raises(UnregisteredElementError) as exc_info:
            registry.tag_name_for_type(custom_class)

        assert exc_info.value.element_class is custom_class
        assert isinstance(exc_info.value, ValueError)

    def test_registry_from_definitions(self, callout_class, badge_class):
        registry = SemanticElementRegistry(define(callout_class), define(badge_class))

        assert registry.tag_names() == ['x-callout', 'x-badge']
        assert [d.tag_name for d in registry] == ['x-callout', 'x-badge']

    def test_registries_are_independent(self, callout_class):
        first = SemanticElementRegistry()
        second = SemanticElementRegistry()
        first.register(callout_class)

        assert 'x-callout' in first
        assert 'x-callout' not in second

    def test_lambda_constructor_with_explicit_class(self, callout_class):
        registry = SemanticElementRegistry()
        registry.register(lambda: callout_class(), callout_class)

        assert registry.tag_name_for_type(callout_class) == 'x-callout'
