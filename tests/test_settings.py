import pytest

from planetshade.settings import (
    ENV_PATTERN,
    ENV_RENORMALIZE_NORMALS,
    ENV_W_EPSILON,
    PatternKind,
    ShaderSettings,
)


def test_defaults():
    s = ShaderSettings()
    assert s.pattern is PatternKind.GAS_GIANT
    assert s.w_epsilon == 1e-6
    assert s.renormalize_normals is False


def test_from_env_empty_mapping_gives_defaults():
    assert ShaderSettings.from_env({}) == ShaderSettings()


def test_from_env_reads_every_field():
    s = ShaderSettings.from_env(
        {
            ENV_PATTERN: " Lava ",
            ENV_W_EPSILON: "0.01",
            ENV_RENORMALIZE_NORMALS: "yes",
        }
    )
    assert s == ShaderSettings(
        pattern=PatternKind.LAVA, w_epsilon=0.01, renormalize_normals=True
    )


def test_from_env_falls_back_on_malformed_values():
    s = ShaderSettings.from_env(
        {ENV_W_EPSILON: "tiny", ENV_RENORMALIZE_NORMALS: "maybe", ENV_PATTERN: ""}
    )
    assert s == ShaderSettings()


def test_from_env_floors_epsilon_at_zero():
    assert ShaderSettings.from_env({ENV_W_EPSILON: "-1"}).w_epsilon == 0.0


def test_from_env_rejects_unknown_pattern():
    with pytest.raises(ValueError, match="Unknown pattern 'plaid'"):
        ShaderSettings.from_env({ENV_PATTERN: "plaid"})


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv(ENV_PATTERN, "cellular")
    monkeypatch.delenv(ENV_W_EPSILON, raising=False)
    monkeypatch.delenv(ENV_RENORMALIZE_NORMALS, raising=False)

    assert ShaderSettings.from_env().pattern is PatternKind.CELLULAR


def test_pattern_kind_is_a_string():
    assert PatternKind.CLOUD == "cloud"
    assert PatternKind.parse("dalmatian") is PatternKind.DALMATIAN


def test_from_env_rejects_custom_pattern():
    with pytest.raises(ValueError, match="built-in pattern"):
        ShaderSettings.from_env({ENV_PATTERN: "custom"})
