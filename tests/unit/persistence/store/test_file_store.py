"""Unit tests for FileKeyValueStore."""

from forum.persistence.gateway import PersistenceGateway
from forum.persistence.store import FileKeyValueStore


class TestFileKeyValueStore:
    """Tests for the one-file-per-key backend."""

    def test_set_get_remove(self, tmp_path):
        """Values are written to files and read back."""
        # Arrange
        store = FileKeyValueStore(tmp_path / "data")

        # Act
        store.set_raw("forum_threads", "[]")

        # Assert
        assert store.get_raw("forum_threads") == "[]"
        assert list(store.keys()) == ["forum_threads"]

        store.remove_raw("forum_threads")
        assert store.get_raw("forum_threads") is None
        store.remove_raw("forum_threads")  # Missing key is a no-op

    def test_keys_with_unsafe_characters(self, tmp_path):
        """Any key maps to a single file and lists back unchanged."""
        # Arrange
        store = FileKeyValueStore(tmp_path)
        key = "liked_threads_user/../x y"

        # Act
        store.set_raw(key, '["t1"]')

        # Assert
        assert store.get_raw(key) == '["t1"]'
        assert list(store.keys()) == [key]
        assert len(list(tmp_path.iterdir())) == 1

    def test_survives_new_instance(self, tmp_path):
        """Data written by one instance is visible to the next."""
        # Arrange
        FileKeyValueStore(tmp_path).set_raw("thread_views_1", "7")

        # Act
        reopened = FileKeyValueStore(tmp_path)

        # Assert
        assert reopened.get_raw("thread_views_1") == "7"

    def test_corrupt_file_only_affects_its_key(self, tmp_path):
        """Through the gateway, a truncated file is discarded on its own."""
        # Arrange
        store = FileKeyValueStore(tmp_path)
        gateway = PersistenceGateway(durable=store)
        gateway.set("thread_likes_1", ["u1"])
        gateway.set("thread_likes_2", ["u2"])
        store.set_raw("thread_likes_1", '["u1"')

        # Act & Assert
        assert gateway.get("thread_likes_1", default=[]) == []
        assert gateway.get("thread_likes_2") == ["u2"]
        assert sorted(store.keys()) == ["thread_likes_2"]
