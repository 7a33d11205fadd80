import pytest


@pytest.mark.parametrize("topic", ["Math", "math", "MATH", "%20Math%20"])
def test_questions_case_insensitive(test_client, math_store, topic):
    r = test_client.get(f"/questions/{topic}")
    assert r.status_code == 200, r.text
    data = r.json()
    assert len(data) == 1
    q = data[0]
    assert q["_id"] == "q1"
    assert q["topic"] == "Math"
    assert q["options"] == ["2", "3", "4", "5"]
    assert q["answer"] == "4"
    assert "__v" not in q


def test_questions_only_for_requested_topic(test_client, math_store):
    math_store.add_topic("Physics")
    math_store.add_question("p1", "Physics", "Unité de force ?", ["N", "J"], "N")
    math_store.add_question("q2", "math", "3 * 3 ?", ["6", "9"], "9")

    r = test_client.get("/questions/math")
    assert r.status_code == 200
    assert sorted(q["_id"] for q in r.json()) == ["q1", "q2"]


def test_unknown_topic_suggests_all_topics(test_client, math_store):
    r = test_client.get("/questions/Chemistry")
    assert r.status_code == 404
    data = r.json()
    assert data["error"] == "Topic not found"
    assert data["suggestions"] == ["Math", "History"]


def test_known_topic_without_questions(test_client, math_store):
    r = test_client.get("/questions/history")
    assert r.status_code == 404
    data = r.json()
    assert data["error"] == "No questions found for this topic"
    assert data["topic"] == "History"


def test_questions_store_failure(test_client, store):
    store.fail = True
    r = test_client.get("/questions/Math")
    assert r.status_code == 500
    assert r.json()["error"] == "Failed to fetch questions"


def test_questions_returned_even_when_answer_not_in_options(test_client, math_store):
    math_store.add_question("q9", "Math", "1 + 1 ?", ["1", "3"], "2")

    r = test_client.get("/questions/Math")
    assert r.status_code == 200, r.text
    broken = next(q for q in r.json() if q["_id"] == "q9")
    assert broken["options"] == ["1", "3"]
    assert broken["answer"] == "2"
