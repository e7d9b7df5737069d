import pytest

from cmdscope.exceptions import CmdScopeError, CommandAlreadyExistsError
from cmdscope.protocols import CommandResolverProtocol
from cmdscope.registry import CommandDescriptor, CommandRegistry


@pytest.fixture
def registry():
    registry = CommandRegistry()
    registry.add_command("go", "Go to a waypoint")
    registry.add_command(
        "teleport",
        "Teleport a player",
        aliases=["tp"],
        arguments=[["alice", "bob"], ["0", "100"]],
    )
    return registry


def test_registry_satisfies_resolver_protocol(registry):
    assert isinstance(registry, CommandResolverProtocol)


@pytest.mark.parametrize("name", ["teleport", "TELEPORT", "Tp", "tp"])
def test_resolve_is_case_insensitive_and_follows_aliases(registry, name):
    command = registry.resolve(name)
    assert command is not None
    assert command.name == "teleport"


@pytest.mark.parametrize("name", ["", "tele", "teleportx", "zap"])
def test_resolve_unknown(registry, name):
    assert registry.resolve(name) is None


def test_duplicate_name_raises(registry):
    with pytest.raises(CommandAlreadyExistsError):
        registry.add_command("GO")


def test_alias_collision_raises(registry):
    with pytest.raises(CmdScopeError):
        registry.add_command("travel", aliases=["tp"])
    assert "travel" not in registry


def test_argument_suggestions_by_ordinal(registry):
    teleport = registry.resolve("tp")
    assert registry.argument_suggestions(teleport, 1) == ["alice", "bob"]
    assert registry.argument_suggestions(teleport, 2) == ["0", "100"]
    assert registry.argument_suggestions(teleport, 0) is None
    assert registry.argument_suggestions(teleport, 3) is None
    assert registry.argument_suggestions(None, 1) is None


def test_suggestion_provider_takes_precedence():
    provider_calls = []

    def provider(ordinal):
        provider_calls.append(ordinal)
        return ("x", "y") if ordinal == 1 else None

    command = CommandDescriptor(
        name="spawn", arguments=[["a"], ["b"]], suggestion_provider=provider
    )
    assert command.get_argument_suggestions(1) == ["x", "y"]
    assert command.get_argument_suggestions(2) == ["b"]
    assert provider_calls == [1, 2]


def test_names_and_container_protocol(registry):
    assert registry.names() == ["go", "teleport"]
    assert registry.names(include_aliases=True) == ["go", "teleport", "tp"]
    assert len(registry) == 2
    assert "TP" in registry
    assert [command.name for command in registry] == ["go", "teleport"]


def test_descriptor_str():
    command = CommandDescriptor(name="teleport", aliases=["tp"])
    assert str(command) == "CommandDescriptor(name='teleport', aliases=['tp'])"
