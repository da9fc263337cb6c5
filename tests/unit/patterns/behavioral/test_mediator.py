"""Tests for the Mediator examples."""

from design_patterns.patterns.behavioral.mediator import conceptual, real_world


class TestMediatorConceptual:
    """Test components collaborating through the mediator."""

    def test_main_output(self, capsys):
        """Test the reactions to A and D."""
        conceptual.main()

        assert capsys.readouterr().out == (
            "Client triggers operation A.\n"
            "Component 1 does A.\n"
            "Mediator reacts on A and triggers following operations:\n"
            "Component 2 does C.\n"
            "\n"
            "Client triggers operation D.\n"
            "Component 2 does D.\n"
            "Mediator reacts on D and triggers following operations:\n"
            "Component 1 does B.\n"
            "Component 2 does C.\n"
        )


class RecordingObserver(real_world.Observer):
    def __init__(self):
        self.received = []

    def update(self, event, emitter, data=None):
        self.received.append(event)


class TestEventDispatcher:
    """Test the event dispatcher mediator."""

    def test_events_is_shared_until_cleared(self):
        """Test the module-level dispatcher accessor."""
        dispatcher = real_world.events()

        assert real_world.events() is dispatcher
        real_world.events.cache_clear()
        assert real_world.events() is not dispatcher

    def test_group_and_wildcard_observers(self, capsys):
        """Test named groups receive their events and '*' receives everything."""
        dispatcher = real_world.EventDispatcher()
        named, everyone = RecordingObserver(), RecordingObserver()
        dispatcher.attach(named, "users:created")
        dispatcher.attach(everyone)

        dispatcher.trigger("users:created", self)
        dispatcher.trigger("users:deleted", self)

        assert named.received == ["users:created"]
        assert everyone.received == ["users:created", "users:deleted"]

    def test_detach(self, capsys):
        """Test a detached observer stops receiving events."""
        dispatcher = real_world.EventDispatcher()
        observer = RecordingObserver()
        dispatcher.attach(observer, "ping")
        dispatcher.detach(observer, "ping")

        dispatcher.trigger("ping", self)

        assert observer.received == []

    def test_user_delete_goes_through_repository(self, capsys):
        """Test the repository removes a user that deleted itself."""
        repository = real_world.UserRepository()
        user = repository.create_user({"name": "Ann"}, silent=True)

        user.delete()

        assert repository.users == {}

    def test_main_output_and_log(self, capsys, tmp_path):
        """Test the event flow and the log file."""
        real_world.main(output_dir=tmp_path)

        assert capsys.readouterr().out.splitlines() == [
            "UserRepository: Loading user records from a file.",
            "EventDispatcher: Broadcasting the 'users:init' event.",
            "Logger: I've written 'users:init' entry to the log.",
            "UserRepository: Creating a user.",
            "EventDispatcher: Broadcasting the 'users:created' event.",
            "OnboardingNotification: The notification has been emailed!",
            "Logger: I've written 'users:created' entry to the log.",
            "User: I can now delete myself without worrying about the repository.",
            "EventDispatcher: Broadcasting the 'users:deleted' event.",
            "UserRepository: Deleting a user.",
            "Logger: I've written 'users:deleted' entry to the log.",
        ]

        log_lines = (tmp_path / "log.txt").read_text(encoding="utf-8").splitlines()
        assert len(log_lines) == 3
        assert "'users:created' with data '{\"attributes\": {\"name\": \"John Smith\"" in log_lines[1]

    def test_rerun_repeats_the_same_output(self, capsys, tmp_path):
        """Test a second run in the same process prints and logs the same as the first."""
        real_world.main(output_dir=tmp_path)
        first = capsys.readouterr().out

        real_world.main(output_dir=tmp_path)
        second = capsys.readouterr().out

        assert second == first
        assert len(first.splitlines()) == 11
        assert len((tmp_path / "log.txt").read_text(encoding="utf-8").splitlines()) == 3
