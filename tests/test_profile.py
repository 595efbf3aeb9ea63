from recipebook.profile import Profile


def test_profile_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("RECIPEBOOK_HOME", str(tmp_path))
    monkeypatch.setenv("RECIPEBOOK_PROFILE", "kitchen")

    profile = Profile.current()

    assert profile.name == "kitchen"
    assert profile.data_root == tmp_path / "kitchen"
    assert profile.save_file == tmp_path / "kitchen" / "recipes.yml"
    assert profile.log_file.parent.is_dir()


def test_explicit_name_and_home_win(tmp_path, monkeypatch):
    monkeypatch.setenv("RECIPEBOOK_PROFILE", "ignored")

    profile = Profile("test", home=tmp_path)

    assert profile.name == "test"
    assert profile.data_root == tmp_path / "test"
    assert repr(profile) == f"Profile(name='test', data_root={tmp_path / 'test'})"
