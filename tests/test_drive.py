"""Tests for the Google Drive image lookup."""

from unittest.mock import MagicMock, patch

from services import drive


def _client_returning(files):
    client = MagicMock()
    client.files.return_value.list.return_value.execute.return_value = {"files": files}
    return client


class TestPickFile:
    def test_exact_name_wins(self):
        files = [{"id": "a", "name": "1001-side.jpg"}, {"id": "b", "name": "1001.png"}]
        assert drive.pick_file(files, "1001")["id"] == "b"

    def test_prefix_match_before_fallback(self):
        files = [{"id": "a", "name": "x-1001.jpg"}, {"id": "b", "name": "1001-front.jpg"}]
        assert drive.pick_file(files, "1001")["id"] == "b"

    def test_falls_back_to_first(self):
        files = [{"id": "a", "name": "old_1001.jpg"}, {"id": "b", "name": "new_1001.jpg"}]
        assert drive.pick_file(files, "1001")["id"] == "a"

    def test_empty_list(self):
        assert drive.pick_file([], "1001") is None


def test_build_query_restricts_folder_name_and_images():
    query = drive.build_query("folder123", "1001")
    assert "'folder123' in parents" in query
    assert "name contains '1001'" in query
    assert "mimeType contains 'image/'" in query
    assert "name contains '.webp'" in query
    assert query.endswith("trashed=false")


def test_build_query_escapes_quotes():
    assert "name contains 'O\\'Brien'" in drive.build_query("f", "O'Brien")


class TestFindImageByCode:
    def test_returns_view_url(self):
        client = _client_returning([{"id": "xyz", "name": "1001.jpg", "mimeType": "image/jpeg"}])
        with patch.object(drive, "get_drive_client", return_value=client):
            url = drive.find_image_by_code("folder", "1001")
        assert url == "https://drive.google.com/uc?export=view&id=xyz"
        kwargs = client.files.return_value.list.call_args.kwargs
        assert kwargs["pageSize"] == 10
        assert "'folder' in parents" in kwargs["q"]

    def test_no_files_returns_none(self):
        with patch.object(drive, "get_drive_client", return_value=_client_returning([])):
            assert drive.find_image_by_code("folder", "1001") is None

    def test_unconfigured_returns_none(self):
        with patch.object(drive, "get_drive_client", return_value=None):
            assert drive.find_image_by_code("folder", "1001") is None

    def test_api_error_is_swallowed(self):
        client = MagicMock()
        client.files.return_value.list.return_value.execute.side_effect = RuntimeError("quota")
        with patch.object(drive, "get_drive_client", return_value=client):
            assert drive.find_image_by_code("folder", "1001") is None

    def test_numeric_code_is_stringified(self):
        client = _client_returning([{"id": "n", "name": "42.png"}])
        with patch.object(drive, "get_drive_client", return_value=client):
            assert drive.find_image_by_code("folder", 42).endswith("id=n")


class TestConnection:
    def test_success(self):
        with patch.object(drive, "get_drive_client", return_value=_client_returning([])):
            assert drive.test_connection("folder") is True

    def test_unconfigured(self):
        with patch.object(drive, "get_drive_client", return_value=None):
            assert drive.test_connection("folder") is False

    def test_error(self):
        client = MagicMock()
        client.files.side_effect = RuntimeError("denied")
        with patch.object(drive, "get_drive_client", return_value=client):
            assert drive.test_connection("folder") is False


class TestGetDriveClient:
    def test_no_credentials(self, app, tmp_path):
        app.config["GOOGLE_SERVICE_ACCOUNT_FILE"] = str(tmp_path / "absent.json")
        with app.app_context():
            assert drive.get_drive_client() is None

    def test_invalid_json_in_config(self, app):
        app.config["GOOGLE_SERVICE_ACCOUNT"] = "{not json"
        with app.app_context():
            assert drive.get_drive_client() is None

    def test_builds_client_from_config(self, app):
        app.config["GOOGLE_SERVICE_ACCOUNT"] = '{"type": "service_account"}'
        with app.app_context(), \
                patch.object(drive.service_account.Credentials, "from_service_account_info") as creds, \
                patch.object(drive, "build") as build:
            client = drive.get_drive_client()
        creds.assert_called_once_with({"type": "service_account"}, scopes=drive.SCOPES)
        build.assert_called_once_with("drive", "v3", credentials=creds.return_value, cache_discovery=False)
        assert client is build.return_value

    def test_builds_client_from_key_file(self, app, tmp_path):
        key_file = tmp_path / "key.json"
        key_file.write_text('{"type": "service_account", "client_email": "a@b"}', encoding="utf-8")
        app.config["GOOGLE_SERVICE_ACCOUNT_FILE"] = str(key_file)
        with app.app_context(), \
                patch.object(drive.service_account.Credentials, "from_service_account_info") as creds, \
                patch.object(drive, "build"):
            drive.get_drive_client()
        assert creds.call_args.args[0]["client_email"] == "a@b"

    def test_outside_app_context_is_unconfigured(self):
        assert drive.get_drive_client() is None
