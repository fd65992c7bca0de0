"""
Test report upload and listing.
"""

from fastapi.testclient import TestClient


def test_upload_and_list_reports(client: TestClient, auth_headers):
    headers = auth_headers()
    for name, analysis in (("cbc.pdf", "normal"), ("lipid.png", "high LDL")):
        response = client.post(
            "/api/reports/upload",
            headers=headers,
            files={"report": (name, b"%PDF-1.4 fake", "application/pdf")},
            data={"analysis": analysis},
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

    reports = client.get("/api/reports", headers=headers).json()
    assert [r["filename"] for r in reports] == ["lipid.png", "cbc.pdf"]
    assert reports[0]["analysis"] == "high LDL"
    assert reports[0]["user_id"] == 1


def test_upload_without_file_uses_default_name(client: TestClient, auth_headers):
    headers = auth_headers()
    response = client.post(
        "/api/reports/upload", headers=headers, data={"analysis": "summary"}
    )
    assert response.status_code == 200
    assert client.get("/api/reports", headers=headers).json()[0]["filename"] == "report.pdf"


def test_upload_rejects_disallowed_type(client: TestClient, auth_headers):
    response = client.post(
        "/api/reports/upload",
        headers=auth_headers(),
        files={"report": ("notes.exe", b"MZ", "application/octet-stream")},
        data={"analysis": "x"},
    )
    assert response.status_code == 400


def test_upload_rejects_oversized_file(client: TestClient, auth_headers, settings):
    settings.max_file_size_mb = 1
    response = client.post(
        "/api/reports/upload",
        headers=auth_headers(),
        files={"report": ("big.pdf", b"0" * (1024 * 1024 + 1), "application/pdf")},
        data={"analysis": "x"},
    )
    assert response.status_code == 400


def test_upload_requires_analysis(client: TestClient, auth_headers):
    response = client.post(
        "/api/reports/upload",
        headers=auth_headers(),
        files={"report": ("cbc.pdf", b"data", "application/pdf")},
    )
    assert response.status_code == 422


def test_reports_empty_for_new_user(client: TestClient, auth_headers):
    assert client.get("/api/reports", headers=auth_headers()).json() == []
