import pytest
from playerflags.core.errors import InvalidIdentifierError, InvalidOwnerError
from playerflags.core.scheduler import Scheduler
from playerflags.flags.handle import Flag
from playerflags.flags.registry import FlagRegistry
from playerflags.host.player import Player

def setup_env():
    return FlagRegistry(Scheduler()), Player("DAWN", 42)

def test_vip_scenario():
    reg, p = setup_env()
    handle = reg.flag(p, "vip")
    assert reg.has_flag(p, "vip") is True
    assert reg.get_flag_value(p, "vip") is True
    handle.set_value({"tier": 2})
    assert p.get_attribute("Flag_vip") == '{"tier":2}'
    assert reg.get_flag_value(p, "vip") == {"tier": 2}
    handle.remove()
    assert reg.has_flag(p, "vip") is False

def test_presence_and_value_agree():
    reg, p = setup_env()
    assert not reg.has_flag(p, "a")
    assert reg.get_flag_value(p, "a") is None
    h = reg.flag(p, "a", 3)
    assert reg.has_flag(p, "a") and reg.get_flag_value(p, "a") == 3
    h.remove()
    assert not reg.has_flag(p, "a")
    assert reg.get_flag_value(p, "a") is None

def test_false_and_zero_are_present_values():
    reg, p = setup_env()
    reg.flag(p, "off", False)
    reg.flag(p, "zero", 0)
    assert reg.has_flag(p, "off") and reg.get_flag_value(p, "off") is False
    assert reg.has_flag(p, "zero") and reg.get_flag_value(p, "zero") == 0

def test_get_or_create_is_stable():
    reg, p = setup_env()
    for default in (True, 7, "gold", {"tier": 1}, [1, 2]):
        name = f"f_{type(default).__name__}"
        first = reg.flag(p, name, default)
        second = reg.flag(p, name, default)
        assert first.get_value() == second.get_value() == default

def test_get_or_create_keeps_existing_value():
    reg, p = setup_env()
    reg.flag(p, "coins", 5)
    again = reg.flag(p, "coins", 100)
    assert again.get_value() == 5
    assert reg.get_flag_value(p, "coins") == 5

def test_get_or_create_falls_back_to_structured_default():
    reg, p = setup_env()
    p.set_attribute("Flag_inv", "{oops")
    h = reg.flag(p, "inv", {"slots": 3})
    assert h.get_value() == {"slots": 3}
    # store untouched until the handle writes
    assert p.get_attribute("Flag_inv") == "{oops"
    assert reg.get_flag_value(p, "inv") == "{oops"

def test_flag_with_none_default_leaves_flag_absent():
    reg, p = setup_env()
    h = reg.flag(p, "ghost", None)
    assert h.get_value() is None
    assert not reg.has_flag(p, "ghost")

def test_get_flags_enumerates_only_flag_attributes():
    reg, p = setup_env()
    reg.flag(p, "a", True)
    reg.flag(p, "b", 12)
    reg.flag(p, "c", {"k": [1]})
    p.set_attribute("Health", 100)
    p.set_attribute("Flagship", "no")
    flags = reg.get_flags(p)
    assert set(flags) == {"a", "b", "c"}
    assert all(isinstance(h, Flag) for h in flags.values())
    assert flags["a"].get_value() is True
    assert flags["b"].get_value() == 12
    assert flags["c"].get_value() == {"k": [1]}
    assert flags["c"].name == "c"

def test_clear_flags_leaves_other_attributes():
    reg, p = setup_env()
    for n in ("a", "b", "c"):
        reg.flag(p, n)
    p.set_attribute("Health", 100)
    assert reg.clear_flags(p) == 3
    for n in ("a", "b", "c"):
        assert not reg.has_flag(p, n)
    assert p.get_attribute("Health") == 100
    assert reg.get_flags(p) == {}

def test_registries_with_different_prefixes_do_not_overlap():
    p = Player("BARRY")
    story = FlagRegistry(Scheduler(), "Story_")
    quest = FlagRegistry(Scheduler(), "Quest_")
    story.flag(p, "intro")
    quest.flag(p, "fetch", 2)
    assert set(story.get_flags(p)) == {"intro"}
    assert set(quest.get_flags(p)) == {"fetch"}
    story.clear_flags(p)
    assert quest.has_flag(p, "fetch")

def test_preconditions_fail_fast():
    reg, p = setup_env()
    with pytest.raises(InvalidOwnerError):
        reg.flag(None, "vip")
    with pytest.raises(InvalidIdentifierError):
        reg.flag(p, "")
    with pytest.raises(InvalidIdentifierError):
        reg.has_flag(p, None)
    p.destroy()
    with pytest.raises(InvalidOwnerError):
        reg.get_flags(p)

def test_empty_prefix_rejected():
    with pytest.raises(ValueError):
        FlagRegistry(Scheduler(), "")

def test_deeply_nested_string_value_reads_back_unchanged():
    reg, p = setup_env()
    deep = "[" * 5000 + "]" * 5000
    reg.flag(p, "note", deep)
    assert reg.get_flag_value(p, "note") == deep
    assert reg.get_flags(p)["note"].get_value() == deep
    assert reg.flag(p, "note", {}).get_value() == {}

def test_registry_requires_host_scheduler():
    with pytest.raises(TypeError):
        FlagRegistry()
    with pytest.raises(TypeError):
        FlagRegistry(None)
    with pytest.raises(TypeError):
        FlagRegistry("Flag_")
