#!/usr/bin/env python3
"""
Smoke tests against a running server:  python backend_test.py [base_url]
"""

import requests
import sys
import json


class IdeaApiTester:
    def __init__(self, base_url="http://localhost:5000/api"):
        self.base_url = base_url.rstrip("/")
        self.tests_run = 0
        self.tests_passed = 0

    def run_test(self, name, method, endpoint, expected_status, data=None):
        """Run a single API test"""
        url = f"{self.base_url}/{endpoint}"
        headers = {'Content-Type': 'application/json'}

        self.tests_run += 1
        print(f"\n🔍 Testing {name}...")
        print(f"   URL: {url}")

        try:
            if method == 'GET':
                response = requests.get(url, headers=headers, timeout=30)
            elif method == 'POST':
                response = requests.post(url, json=data, headers=headers, timeout=30)
            else:
                raise ValueError(f"Unsupported method {method}")

            try:
                response_data = response.json()
            except ValueError:
                response_data = {}

            if response.status_code == expected_status:
                self.tests_passed += 1
                print(f"✅ Passed - Status: {response.status_code}")
                print(f"   Response: {json.dumps(response_data, indent=2)[:200]}...")
                return True, response_data

            print(f"❌ Failed - Expected {expected_status}, got {response.status_code}")
            print(f"   Error: {response_data or response.text}")
            return False, response_data

        except requests.exceptions.Timeout:
            print(f"❌ Failed - Request timeout")
            return False, {}
        except requests.exceptions.RequestException as e:
            print(f"❌ Failed - Error: {str(e)}")
            return False, {}

    def test_root_endpoint(self):
        """Test root API endpoint"""
        success, _ = self.run_test("Root API Endpoint", "GET", "", 200)
        return success

    def test_options(self):
        """Test enum options endpoint"""
        success, response = self.run_test("Form Options", "GET", "options", 200)
        return success and len(response.get("domain", [])) == 5

    def test_generate_aiml_advanced(self):
        """Advanced AIML major project carries the ML extras"""
        success, response = self.run_test(
            "Generate (AIML / Advanced / Major)",
            "POST",
            "generate",
            200,
            data={
                "skillLevel": "Advanced",
                "domain": "AIML",
                "language": "Python",
                "projectType": "Major Project",
            }
        )
        if not success:
            return False

        title = response.get("title", "")
        print(f"   Title: {title}")
        print(f"   Model: {response.get('modelName')} / {response.get('evaluationMetric')}")
        templates = [t.get("filename") for t in response.get("codeTemplates", [])]
        return (
            title.startswith("Advanced ")
            and title.endswith(" System")
            and "TensorFlow" in response.get("techStack", [])
            and bool(response.get("advancedMetadata"))
            and "train.py" in templates
        )

    def test_generate_web_mini(self):
        """Web Dev mini project has no ML fields"""
        success, response = self.run_test(
            "Generate (Web Dev / Beginner / Mini)",
            "POST",
            "generate",
            200,
            data={
                "skillLevel": "Beginner",
                "domain": "Web Dev",
                "language": "JavaScript",
                "projectType": "Mini Project",
            }
        )
        return success and response.get("title", "").startswith("Lite ") and "modelName" not in response

    def test_generate_invalid_skill(self):
        """Out-of-enum skill level is rejected"""
        success, response = self.run_test(
            "Generate (Invalid skillLevel)",
            "POST",
            "generate",
            400,
            data={
                "skillLevel": "Expert",
                "domain": "AIML",
                "language": "Python",
                "projectType": "Major Project",
            }
        )
        return success and response.get("field") == "skillLevel"


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000/api"
    print("🚀 Starting Project Idea API Tests")
    print("=" * 50)

    tester = IdeaApiTester(base_url)

    tests = [
        ("Root Endpoint", tester.test_root_endpoint),
        ("Form Options", tester.test_options),
        ("Generate AIML Advanced", tester.test_generate_aiml_advanced),
        ("Generate Web Mini", tester.test_generate_web_mini),
        ("Invalid Skill Level", tester.test_generate_invalid_skill),
    ]

    failed_tests = []

    for test_name, test_func in tests:
        if not test_func():
            failed_tests.append(test_name)

    # Print results
    print("\n" + "=" * 50)
    print("📊 TEST RESULTS")
    print("=" * 50)
    print(f"Tests run: {tester.tests_run}")
    print(f"Tests passed: {tester.tests_passed}")
    print(f"Tests failed: {len(failed_tests)}")

    if failed_tests:
        print(f"\n❌ Failed tests:")
        for test in failed_tests:
            print(f"   - {test}")
    else:
        print(f"\n✅ All tests passed!")

    return 0 if len(failed_tests) == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
