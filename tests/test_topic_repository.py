from markdown_memo.repositories import memo_repository, topic_repository, topic_tag_repository


def _ids(topics):
    return sorted(topic.id for topic in topics)


def test_list_all_topics_is_empty(storage):
    with storage.session() as session:
        assert topic_repository.list_all_topics(session) == []


def test_create_topic(storage):
    big = 2**63 - 1
    with storage.session() as session:
        created = topic_repository.create_topic(session, "t1", "title1", big)
        assert (created.id, created.title, created.timestamp) == ("t1", "title1", big)

    with storage.session() as session:
        topics = topic_repository.list_all_topics(session)
        assert [(t.id, t.title, t.timestamp) for t in topics] == [("t1", "title1", big)]


def test_create_topic_twice_keeps_both_rows(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "a", 0)
        topic_repository.create_topic(session, "t1", "b", 1)

    with storage.session() as session:
        assert len(topic_repository.list_all_topics(session)) == 2


def test_get_topic(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 3)

    with storage.session() as session:
        assert topic_repository.get_topic(session, "t1").title == "title1"
        assert topic_repository.get_topic(session, "t2") is None


def test_delete_topic(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 0)

    with storage.session() as session:
        topic_repository.delete_topic(session, "t1")
        topic_repository.delete_topic(session, "missing")

    with storage.session() as session:
        assert topic_repository.list_all_topics(session) == []


def test_update_topic(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 2**63 - 1)

    with storage.session() as session:
        updated = topic_repository.update_topic(session, "t1", "title2", 1)
        assert [(t.id, t.title, t.timestamp) for t in updated] == [("t1", "title2", 1)]

    with storage.session() as session:
        topics = topic_repository.list_all_topics(session)
        assert [(t.id, t.title, t.timestamp) for t in topics] == [("t1", "title2", 1)]


def test_search_without_tokens_returns_all(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 0)
        topic_repository.create_topic(session, "t2", "title2", 1)

    with storage.session() as session:
        assert _ids(topic_repository.search_topics(session, [], [])) == ["t1", "t2"]


def test_search_words(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 0)
        topic_repository.create_topic(session, "t2", "title2", 1)
        memo_repository.create_memo(session, "m1", "t1", 0, "abc")
        memo_repository.create_memo(session, "m2", "t1", 0, "cde")
        memo_repository.create_memo(session, "m3", "t2", 0, "bcd")

    with storage.session() as session:
        assert _ids(topic_repository.search_topics(session, ["bc"], [])) == ["t1", "t2"]
        assert _ids(topic_repository.search_topics(session, ["de"], [])) == ["t1"]
        assert _ids(topic_repository.search_topics(session, ["def"], [])) == []
        assert _ids(topic_repository.search_topics(session, ["def", "bcd"], [])) == ["t2"]


def test_search_words_is_case_sensitive_and_literal(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 0)
        memo_repository.create_memo(session, "m1", "t1", 0, "Hello world")

    with storage.session() as session:
        assert _ids(topic_repository.search_topics(session, ["Hello"], [])) == ["t1"]
        assert _ids(topic_repository.search_topics(session, ["hello"], [])) == []
        assert _ids(topic_repository.search_topics(session, ["H%o"], [])) == []
        assert _ids(topic_repository.search_topics(session, ["' OR 1=1 --"], [])) == []


def test_search_tags(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 0)
        topic_repository.create_topic(session, "t2", "title2", 1)
        topic_tag_repository.create_tag(session, "abc", "t1")
        topic_tag_repository.create_tag(session, "cde", "t1")
        topic_tag_repository.create_tag(session, "abc", "t2")

    with storage.session() as session:
        assert _ids(topic_repository.search_topics(session, [], ["abc"])) == ["t1", "t2"]
        assert _ids(topic_repository.search_topics(session, [], ["cde"])) == ["t1"]
        assert _ids(topic_repository.search_topics(session, [], ["def"])) == []


def test_search_words_and_tags(storage):
    with storage.session() as session:
        topic_repository.create_topic(session, "t1", "title1", 0)
        topic_repository.create_topic(session, "t2", "title2", 1)
        memo_repository.create_memo(session, "m1", "t1", 0, "abc")
        memo_repository.create_memo(session, "m2", "t1", 0, "def")
        memo_repository.create_memo(session, "m3", "t2", 0, "bcd")
        topic_tag_repository.create_tag(session, "abc", "t1")
        topic_tag_repository.create_tag(session, "cde", "t1")
        topic_tag_repository.create_tag(session, "abc", "t2")

    with storage.session() as session:
        assert _ids(topic_repository.search_topics(session, ["bc"], ["abc"])) == ["t1", "t2"]
        assert _ids(topic_repository.search_topics(session, ["de"], ["cde"])) == ["t1"]
        assert _ids(topic_repository.search_topics(session, ["cd"], ["cde"])) == []
