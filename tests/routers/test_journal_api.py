# tests/routers/test_journal_api.py


def test_create_journal_entry_stores_analysis(client, mock_analyzer):
    response = client.post("/api/journal-entries", json={"content": "Today I felt thankful."})
    assert response.status_code == 201
    body = response.json()
    assert body["content"] == "Today I felt thankful."
    assert body["sentimentScore"] == 8
    assert body["emotionTags"] == ["grateful", "calm"]
    assert body["chakraTags"] == ["heart"]
    assert body["summary"] == "A grateful, settled day."
    mock_analyzer.analyze.assert_awaited_once_with("Today I felt thankful.")


def test_empty_journal_entry_is_rejected(client, mock_analyzer):
    response = client.post("/api/journal-entries", json={"content": ""})
    assert response.status_code == 422
    mock_analyzer.analyze.assert_not_called()


def test_list_journal_entries_newest_first(client):
    client.post("/api/journal-entries", json={"content": "first"})
    client.post("/api/journal-entries", json={"content": "second"})
    body = client.get("/api/journal-entries").json()
    assert [e["content"] for e in body] == ["second", "first"]


def test_emotion_tracking_is_normalized(client):
    response = client.post("/api/emotion-tracking", json={"emotion": "  Anxiety ", "intensity": 7, "note": "work"})
    assert response.status_code == 201
    body = response.json()
    assert body["emotion"] == "anxiety"
    assert body["intensity"] == 7
    assert body["note"] == "work"

    listed = client.get("/api/emotion-tracking").json()
    assert [t["emotion"] for t in listed] == ["anxiety"]


def test_emotion_intensity_out_of_range(client):
    assert client.post("/api/emotion-tracking", json={"emotion": "joy", "intensity": 11}).status_code == 422
    assert client.post("/api/emotion-tracking", json={"emotion": "joy", "intensity": 0}).status_code == 422
