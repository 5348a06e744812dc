from diskscape.ui_effects import UiEffects


def test_defaults():
    effects = UiEffects()
    assert effects.flash_space_freed is False
    assert effects.current_path_is_red is False
    assert effects.deletion_in_progress is False
    assert effects.loading_progress_indicator == 0
    assert effects.last_read_path is None


def test_increment_step():
    effects = UiEffects()
    effects.increment_loading_progress_indicator()
    assert effects.loading_progress_indicator == 3


def test_increments_are_uniform():
    effects = UiEffects()
    values = [effects.loading_progress_indicator]
    for _ in range(5):
        effects.increment_loading_progress_indicator()
        values.append(effects.loading_progress_indicator)
    steps = {b - a for a, b in zip(values, values[1:])}
    assert len(steps) == 1
    assert steps.pop() > 0