import os, requests, streamlit as st

API = os.getenv("API_URL", "http://localhost:8000")
HEADERS = {"X-API-Key": os.getenv("API_KEY", "dev-api-key-change-in-production")}

def api(method: str, path: str, **kwargs):
    r = requests.request(method, f"{API}/api{path}", headers=HEADERS, timeout=30, **kwargs)
    if not r.ok:
        try:
            detail = r.json().get("detail") or r.json().get("message")
        except ValueError:
            detail = None
        raise RuntimeError(detail or f"HTTP {r.status_code}")
    return r.json() if r.status_code != 204 else {}

def render_tasks(tasks):
    if not tasks:
        st.caption("No tasks yet. Add one above!")
    for task in tasks:
        cols = st.columns([1, 8, 1, 1])
        done = cols[0].checkbox("done", value=task["completed"], key=f"done-{task['id']}", label_visibility="collapsed")
        if done != task["completed"]:
            api("POST", f"/tasks/{task['id']}/complete")
            st.rerun()
        title = f"~~{task['title']}~~" if task["completed"] else task["title"]
        cols[1].markdown(title)
        if task["parse_warning"]:
            cols[2].markdown("⚠️", help=task["parse_errors"] or "Parse warning - review this task")
        if cols[3].button("🗑️", key=f"del-{task['id']}", help="Delete task"):
            api("DELETE", f"/tasks/{task['id']}")
            st.rerun()

st.set_page_config(page_title="LifeTracker", layout="centered")
st.title("LifeTracker")

try:
    tasks = api("GET", "/tasks")["tasks"]
    llm = api("GET", "/voice/health")
except (requests.RequestException, RuntimeError) as e:
    st.error(f"Failed to load tasks: {e}")
    st.stop()

open_tasks = [t for t in tasks if not t["completed"]]
completed = [t for t in tasks if t["completed"]]
st.caption(f"{len(open_tasks)} task{'s' if len(open_tasks) != 1 else ''} remaining · LLM {llm['llm']}")

with st.form("add", clear_on_submit=True):
    text = st.text_input("Add a task...", placeholder="e.g. Remind me to call the dentist tomorrow")
    parse = st.checkbox("Parse as voice input", value=True)
    if st.form_submit_button("Add") and text.strip():
        try:
            if parse:
                r = api("POST", "/voice", json={"input": text})
                st.success(r["message"])
                if r["parsing"]["warning"]:
                    st.warning(r["parsing"]["errors"])
            else:
                api("POST", "/tasks", json={"title": text.strip()})
            st.rerun()
        except (requests.RequestException, RuntimeError) as e:
            st.error(f"Failed to create task: {e}")

render_tasks(open_tasks)

if completed:
    st.subheader(f"Completed ({len(completed)})")
    render_tasks(completed)
