"""
Unit tests for BaseContainer.
"""
import pytest

from calicot.di.base_container import BaseContainer


class _Service:
    pass


def test_singleton_returns_same_instance():
    container = BaseContainer()
    instance = _Service()
    container.register_singleton(_Service, instance)

    assert container.get(_Service) is instance
    assert container.is_registered(_Service)


def test_factory_builds_per_lookup():
    container = BaseContainer()
    container.register_factory(_Service, _Service)

    assert container.get(_Service) is not container.get(_Service)


def test_reregistration_replaces_previous_kind():
    container = BaseContainer()
    instance = _Service()
    container.register_factory("service", _Service)
    container.register_singleton("service", instance)

    assert container.get("service") is instance


def test_missing_registration_raises():
    with pytest.raises(ValueError, match="No registration for _Service"):
        BaseContainer().get(_Service)
