# backend/client.py
import os

import requests

API = "http://localhost:8000"  # adjust if running on docker-compose
HEADERS = {"X-API-Key": os.getenv("API_KEY", "dev-api-key-change-in-production")}

def test_health():
    r = requests.get(f"{API}/health")
    print("Health:", r.status_code, r.json())
    r = requests.get(f"{API}/api/voice/health", headers=HEADERS)
    print("LLM health:", r.status_code, r.json())

def test_voice():
    r = requests.post(f"{API}/api/voice", json={"input": "Remind me to call the dentist tomorrow"}, headers=HEADERS)
    print("Voice:", r.status_code, r.json())

def test_create_task():
    payload = {
        "title": "Finish FastAPI client",
        "notes": "Write a simple requests-based client script",
        "priority": "MEDIUM",
    }
    r = requests.post(f"{API}/api/tasks", json=payload, headers=HEADERS)
    print("Create task:", r.status_code, r.json())
    return r.json()["task"]["id"]

def test_complete_and_delete(task_id):
    r = requests.post(f"{API}/api/tasks/{task_id}/complete", headers=HEADERS)
    print("Complete:", r.status_code, r.json()["task"]["completed"])
    r = requests.delete(f"{API}/api/tasks/{task_id}", headers=HEADERS)
    print("Delete:", r.status_code)

def test_list_tasks():
    r = requests.get(f"{API}/api/tasks", headers=HEADERS)
    print("List tasks:", r.status_code, r.json())

def test_lists():
    r = requests.get(f"{API}/api/lists", headers=HEADERS)
    print("Lists:", r.status_code, r.json())

if __name__ == "__main__":
    print("--- Testing LifeTracker API ---")
    test_health()
    test_voice()
    task_id = test_create_task()
    test_list_tasks()
    test_lists()
    test_complete_and_delete(task_id)
