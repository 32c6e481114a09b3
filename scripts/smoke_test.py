"""
Smoke test against a running server.
Walks every route once and prints PASS/FAIL per step.

Usage: python scripts/smoke_test.py [base_url]
"""
import sys
import requests

API_BASE = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000"

total_tests = 0
passed_tests = 0


def print_test(name, passed, details=""):
    global total_tests, passed_tests
    total_tests += 1
    if passed:
        passed_tests += 1
    status = "[PASS]" if passed else "[FAIL]"
    print(f"{status} {name}")
    if details:
        print(f"     {details}")


def call(method, path, **kwargs):
    try:
        resp = requests.request(method, f"{API_BASE}{path}", timeout=10, **kwargs)
        return resp.status_code, resp.json()
    except requests.RequestException as e:
        return None, {"error": str(e)}


print("=" * 70)
print(f"SMOKE TEST: {API_BASE}")
print("=" * 70)

status, data = call("GET", "/health")
print_test("Health check", status == 200 and data.get("status") == "OK", str(data))

status, data = call("POST", "/api/resumes", json={"personalInfo": {"fullName": "Smoke Test"}})
print_test("Create without email is rejected", status == 400, str(data))

status, data = call("POST", "/api/resumes", json={
    "personalInfo": {"fullName": "Smoke Test", "email": "smoke@example.com"},
    "skills": [{"category": "Testing", "items": ["requests"]}],
})
resume_id = (data.get("data") or {}).get("id")
print_test("Create resume", status == 201 and bool(resume_id), f"ID: {resume_id}")

if resume_id:
    status, data = call("GET", f"/api/resumes/{resume_id}")
    print_test("Fetch resume", status == 200 and data["data"]["personalInfo"]["email"] == "smoke@example.com")

    status, data = call("PUT", f"/api/resumes/{resume_id}", json={"summary": "updated by smoke test"})
    print_test("Update summary", status == 200 and data["data"].get("summary") == "updated by smoke test")

    status, data = call("GET", "/api/resumes?page=1&limit=5")
    listed = [r["id"] for r in data.get("data", [])]
    print_test("List includes new resume", status == 200 and resume_id in listed, str(data.get("pagination")))

    status, data = call("DELETE", f"/api/resumes/{resume_id}")
    print_test("Delete resume", status == 200, str(data))

    status, data = call("GET", f"/api/resumes/{resume_id}")
    print_test("Deleted resume is gone", status == 404, str(data))
else:
    print_test("Remaining CRUD steps", False, "Skipped - no resume ID")

status, data = call("GET", "/api/does-not-exist")
print_test("Unknown route", status == 404 and data == {"error": "Route not found"})

print("=" * 70)
print(f"{passed_tests}/{total_tests} passed")
sys.exit(0 if passed_tests == total_tests else 1)
