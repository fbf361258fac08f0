# tests/routers/test_coach_api.py
from services.assessment_engine.models import ChakraProfile
from soulsync.services import storage
from soulsync.text_analysis.client import CHAT_FALLBACK_REPLY
from soulsync.text_analysis.prompts import COACH_SYSTEM_PROMPTS, CoachType


def _chat(client, **payload):
    return client.post("/api/coach-chat", json=payload)


# --- Starting conversations ---

def test_new_conversation(client, mock_analyzer):
    response = _chat(client, coachType="inner_child", message="Hello")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == CHAT_FALLBACK_REPLY

    conversation = body["conversation"]
    assert conversation["coachType"] == "inner_child"
    assert [m["role"] for m in conversation["messages"]] == ["system", "user", "assistant"]
    assert conversation["messages"][1]["content"] == "Hello"

    prompt, coach_type = mock_analyzer.chat.call_args.args
    assert coach_type == "inner_child"
    assert prompt[0]["content"] == COACH_SYSTEM_PROMPTS[CoachType.INNER_CHILD]


def test_new_conversation_includes_chakra_context(client, mock_analyzer, run_db):
    profile = ChakraProfile.from_mapping({"root": 2.0})
    run_db(lambda s: storage.save_profile(s, 1, profile, "basic"))

    _chat(client, coachType="inner_child", message="Hello")
    system_prompt = mock_analyzer.chat.call_args.args[0][0]["content"]
    assert system_prompt.startswith(COACH_SYSTEM_PROMPTS[CoachType.INNER_CHILD])
    assert "CHAKRA ASSESSMENT CONTEXT" in system_prompt
    assert "Root: 2.0/10 (underactive)" in system_prompt


def test_previous_conversation_is_used_as_context(client, mock_analyzer):
    _chat(client, coachType="shadow_self", message="First chat")
    second = _chat(client, coachType="shadow_self", message="Second chat").json()

    prompt = mock_analyzer.chat.call_args.args[0]
    assert [m["role"] for m in prompt] == ["system", "user", "assistant", "user"]
    assert prompt[1]["content"] == "First chat"
    # History informs the prompt but is not copied into the new conversation
    assert [m["role"] for m in second["conversation"]["messages"]] == ["system", "user", "assistant"]


# --- Continuing conversations ---

def test_continue_conversation(client, mock_analyzer):
    first = _chat(client, coachType="higher_self", message="One").json()
    conversation_id = first["conversation"]["id"]

    body = _chat(client, coachType="higher_self", message="Two", conversationId=conversation_id).json()
    assert body["conversation"]["id"] == conversation_id
    assert [m["role"] for m in body["conversation"]["messages"]] == [
        "system", "user", "assistant", "user", "assistant",
    ]
    prompt = mock_analyzer.chat.call_args.args[0]
    assert prompt[-1] == {"role": "user", "content": "Two"}


def test_continue_with_wrong_coach_type(client):
    conversation_id = _chat(client, coachType="higher_self", message="One").json()["conversation"]["id"]
    response = _chat(client, coachType="integration", message="Two", conversationId=conversation_id)
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_continue_missing_conversation(client):
    response = _chat(client, coachType="integration", message="Hi", conversationId=999)
    assert response.status_code == 404


def test_continue_other_users_conversation(client, run_db):
    other = run_db(lambda s: storage.create_coach_conversation(s, 2, "integration", []))
    response = _chat(client, coachType="integration", message="Hi", conversationId=other.id)
    assert response.status_code == 404


def test_unknown_coach_type_is_422(client):
    assert _chat(client, coachType="guru", message="Hi").status_code == 422


# --- Listing and deleting ---

def test_list_conversations_by_coach(client):
    _chat(client, coachType="inner_child", message="a")
    _chat(client, coachType="inner_child", message="b")
    _chat(client, coachType="higher_self", message="c")

    listed = client.get("/api/coach-conversations", params={"coachType": "inner_child"}).json()
    assert len(listed) == 2
    assert {c["coachType"] for c in listed} == {"inner_child"}


def test_list_conversations_requires_valid_coach_type(client):
    assert client.get("/api/coach-conversations").status_code == 422
    assert client.get("/api/coach-conversations", params={"coachType": "guru"}).status_code == 422


def test_delete_conversation(client):
    conversation_id = _chat(client, coachType="integration", message="Hi").json()["conversation"]["id"]
    assert client.delete(f"/api/coach-conversations/{conversation_id}").status_code == 204
    assert client.delete(f"/api/coach-conversations/{conversation_id}").status_code == 404
    assert client.get("/api/coach-conversations", params={"coachType": "integration"}).json() == []
