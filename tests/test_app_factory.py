import main


def test_import_builds_no_module_level_app():
    assert not hasattr(main, "app")


def test_create_app_uses_given_session_factory(monkeypatch, session_factory):
    def fail_create_engine(*args, **kwargs):
        raise AssertionError("engine must not be created when a session factory is given")

    monkeypatch.setattr(main, "create_engine", fail_create_engine)

    app = main.create_app(session_factory)

    assert {route.path for route in app.routes} >= {"/health", "/ideas", "/ideas/{idea_id}"}
