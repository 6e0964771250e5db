from fastapi.testclient import TestClient
from codecamp.main import app

client = TestClient(app)

ABSTRACT = 'A practical walk through the topic in under an hour.'


def _talks(moniker='ATL2018'):
    r = client.get(f'/api/camps/{moniker}/talks')
    assert r.status_code == 200
    return r.json()


def _speaker_ids():
    return sorted({t['speaker']['speakerId'] for t in _talks()})


def _create_talk(title='Testing FastAPI', speaker_id=None):
    speaker_id = speaker_id or _speaker_ids()[0]
    body = {'title': title, 'abstract': ABSTRACT, 'level': 200, 'speaker': {'speakerId': speaker_id}}
    r = client.post('/api/camps/ATL2018/talks', json=body)
    assert r.status_code == 201
    return r


def test_list_talks_includes_speakers():
    talks = _talks()
    assert len(talks) >= 2
    assert all(t['speaker']['lastName'] for t in talks)


def test_list_talks_for_unknown_camp_is_not_found():
    r = client.get('/api/camps/DOESNOTEXIST/talks')
    assert r.status_code == 404
    assert r.json()['detail'] == 'Talks not found'


def test_get_talk_is_scoped_to_camp():
    talk = _talks()[0]
    r = client.get(f"/api/camps/ATL2018/talks/{talk['talkId']}")
    assert r.status_code == 200
    assert r.json()['title'] == talk['title']
    client.post('/api/camps', json={'moniker': 'SCOPE1', 'name': 'Scope Camp', 'eventDate': '2024-02-02'})
    assert client.get(f"/api/camps/SCOPE1/talks/{talk['talkId']}").status_code == 404


def test_create_talk_returns_location():
    r = _create_talk()
    talk = r.json()
    assert r.headers['Location'] == f"/api/camps/ATL2018/talks/{talk['talkId']}"
    fetched = client.get(r.headers['Location'])
    assert fetched.status_code == 200
    assert fetched.json()['speaker']['speakerId'] == talk['speaker']['speakerId']


def test_create_talk_without_speaker():
    body = {'title': 'No Speaker', 'abstract': ABSTRACT, 'level': 100}
    r = client.post('/api/camps/ATL2018/talks', json=body)
    assert r.status_code == 400
    assert r.json()['detail'] == 'Speaker ID is required'


def test_create_talk_with_unknown_speaker_is_not_persisted():
    before = len(_talks())
    body = {'title': 'Ghost Talk', 'abstract': ABSTRACT, 'level': 100, 'speaker': {'speakerId': 9999}}
    r = client.post('/api/camps/ATL2018/talks', json=body)
    assert r.status_code == 400
    assert r.json()['detail'] == 'Speaker not found'
    assert len(_talks()) == before
    assert 'Ghost Talk' not in [t['title'] for t in _talks()]


def test_create_talk_for_unknown_camp():
    body = {'title': 'Lost', 'abstract': ABSTRACT, 'level': 100, 'speaker': {'speakerId': _speaker_ids()[0]}}
    r = client.post('/api/camps/DOESNOTEXIST/talks', json=body)
    assert r.status_code == 400


def test_create_talk_with_short_abstract_is_rejected():
    body = {'title': 'Short', 'abstract': 'too short', 'level': 100, 'speaker': {'speakerId': _speaker_ids()[0]}}
    assert client.post('/api/camps/ATL2018/talks', json=body).status_code == 400


def test_update_talk_and_speaker():
    first, second = _speaker_ids()[:2]
    talk = _create_talk(title='Before Update', speaker_id=first).json()
    url = f"/api/camps/ATL2018/talks/{talk['talkId']}"
    r = client.put(url, json={'title': 'After Update', 'abstract': ABSTRACT, 'level': 300, 'speaker': {'speakerId': second}})
    assert r.status_code == 200
    assert r.json()['title'] == 'After Update'
    assert r.json()['speaker']['speakerId'] == second
    assert client.get(url).json()['level'] == 300


def test_update_talk_with_unknown_speaker_keeps_association():
    first = _speaker_ids()[0]
    talk = _create_talk(title='Keep Speaker', speaker_id=first).json()
    url = f"/api/camps/ATL2018/talks/{talk['talkId']}"
    r = client.put(url, json={'title': 'Should Not Stick', 'abstract': ABSTRACT, 'level': 100, 'speaker': {'speakerId': 9999}})
    assert r.status_code == 400
    assert r.json()['detail'] == 'Speaker not found'
    current = client.get(url).json()
    assert current['speaker']['speakerId'] == first
    assert current['title'] == 'Keep Speaker'


def test_update_missing_talk():
    r = client.put('/api/camps/ATL2018/talks/999999', json={'title': 'Nope', 'abstract': ABSTRACT, 'level': 100})
    assert r.status_code == 404


def test_delete_talk_then_get_is_not_found():
    talk = _create_talk(title='Short Lived').json()
    url = f"/api/camps/ATL2018/talks/{talk['talkId']}"
    assert client.delete(url).status_code == 200
    assert client.get(url).status_code == 404
    assert client.delete(url).status_code == 404


def test_non_numeric_talk_id_is_not_found():
    assert client.get('/api/camps/ATL2018/talks/abc').status_code == 404
    assert client.delete('/api/camps/ATL2018/talks/abc').status_code == 404
