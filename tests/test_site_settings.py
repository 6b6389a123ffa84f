"""
Site settings singleton and the WhatsApp contact link
"""
from urllib.parse import quote

from app.models import SiteSettings
from app.services.contact_links import GENERAL_GREETING, build_whatsapp_link, normalize_phone, program_greeting


class TestSiteSettings:
    def test_public_defaults_when_empty(self, client):
        response = client.get("/api/site-settings")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] is None
        assert body["site_name"] is None

    def test_first_save_inserts(self, client, auth_headers, count_rows):
        assert count_rows(SiteSettings) == 0
        response = client.put(
            "/api/admin/site-settings",
            json={"site_name": "Study Abroad", "phone": "+20 100 000 0000"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["site_name"] == "Study Abroad"
        assert count_rows(SiteSettings) == 1

    def test_second_save_updates_same_row(self, client, auth_headers, count_rows):
        first = client.put(
            "/api/admin/site-settings",
            json={"site_name": "Study Abroad", "email": "info@example.com"},
            headers=auth_headers,
        ).json()
        second = client.put(
            "/api/admin/site-settings",
            json={"site_name": "Study Abroad Plus", "primary_color": "#003366"},
            headers=auth_headers,
        ).json()

        assert count_rows(SiteSettings) == 1
        assert second["id"] == first["id"]
        assert second["site_name"] == "Study Abroad Plus"
        assert second["primary_color"] == "#003366"
        assert second["email"] == "info@example.com"

        public = client.get("/api/site-settings").json()
        assert public["site_name"] == "Study Abroad Plus"

    def test_save_requires_admin(self, client, count_rows):
        response = client.put("/api/admin/site-settings", json={"site_name": "x"})
        assert response.status_code == 401
        assert count_rows(SiteSettings) == 0


class TestWhatsAppLink:
    def test_build_link(self):
        url = build_whatsapp_link("+20 (100) 123-4567", "Hello there")
        assert url == "https://wa.me/201001234567?text=Hello%20there"

    def test_no_number(self):
        assert build_whatsapp_link(None) is None
        assert build_whatsapp_link("---") is None
        assert normalize_phone(None) == ""

    def test_endpoint_not_configured(self, client):
        assert client.get("/api/site-settings/whatsapp-link").status_code == 404

    def test_endpoint_general_and_program(self, client, auth_headers, seed):
        client.put("/api/admin/site-settings", json={"whatsapp": "+971 50 000 0000"}, headers=auth_headers)
        program = seed.program(name_en="Law", name_ar="القانون")

        general = client.get("/api/site-settings/whatsapp-link").json()["url"]
        assert general == "https://wa.me/971500000000?text=" + quote(GENERAL_GREETING, safe="")

        specific = client.get(f"/api/site-settings/whatsapp-link?program_id={program}").json()["url"]
        assert specific == "https://wa.me/971500000000?text=" + quote(program_greeting("القانون"), safe="")
        assert specific.endswith(quote("القانون", safe=""))

    def test_greetings_are_arabic(self):
        assert GENERAL_GREETING == "مرحباً، أريد الاستفسار عن خدماتكم"
        assert program_greeting("الطب") == "مرحباً، أريد الاستفسار عن البرنامج الدراسي: الطب"
