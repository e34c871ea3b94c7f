def test_new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    data = response.get_json()
    assert data['success']
    assert data['game_id']
    assert data['state']['guesses'] == []
    assert data['state']['word_length'] == 5
    assert data['state']['answer'] is None


def test_get_state(client, game_service):
    game_id = game_service.create_new_game("crane")
    response = client.get(f'/api/game/{game_id}/state')
    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_unknown_game_is_404(client):
    response = client.get('/api/game/missing/state')
    assert response.status_code == 404
    assert response.get_json()['success'] is False

    response = client.post('/api/game/missing/guess', json={'guess': 'crane'})
    assert response.status_code == 404


def test_guess_flow(client, game_service):
    game_id = game_service.create_new_game("crane")

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'TRACE'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['result'] == [
        ['t', 'ABSENT'], ['r', 'CORRECT'], ['a', 'CORRECT'], ['c', 'PRESENT'], ['e', 'CORRECT']
    ]
    assert data['letter_status']['c'] == 'PRESENT'
    assert data['solved'] is False

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'crane'})
    data = response.get_json()
    assert data['solved'] is True
    assert data['state']['answer'] == 'crane'
    assert data['state']['letter_status']['c'] == 'CORRECT'


def test_rejected_guesses(client, game_service):
    game_id = game_service.create_new_game("crane")

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})
    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'not_in_vocabulary'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'cran'})
    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'wrong_length'

    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400

    assert game_service.get_game_state(game_id).guesses == []


def test_update_input(client, game_service):
    game_id = game_service.create_new_game("crane")
    response = client.put(f'/api/game/{game_id}/input', json={'input': 'cra'})
    assert response.get_json()['input_word'] == 'cra'

    response = client.put(f'/api/game/{game_id}/input', json={'input': 'cranes'})
    assert response.get_json()['input_word'] == 'cra'

    response = client.put(f'/api/game/{game_id}/input', json={'input': 5})
    assert response.status_code == 400


def test_definitions_empty_when_lookup_disabled(client, game_service):
    game_id = game_service.create_new_game("crane")
    response = client.get(f'/api/game/{game_id}/definitions')
    assert response.get_json() == {'success': True, 'definitions': []}


def test_delete_game(client, game_service):
    game_id = game_service.create_new_game("crane")
    assert client.delete(f'/api/game/{game_id}').get_json()['success']
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health(client, game_service):
    game_service.create_new_game("crane")
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['vocabulary_size'] == 9
    assert data['vocabulary_stats']['total_words'] == 9


def test_state_includes_keyboard_rows(client, game_service):
    game_id = game_service.create_new_game("crane")
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'slate'})
    rows = client.get(f'/api/game/{game_id}/state').get_json()['state']['keyboard_rows']
    keys = {letter: status for row in rows for letter, status in row}
    assert len(keys) == 26
    assert keys['a'] == 'CORRECT'
    assert keys['s'] == 'ABSENT'
    assert keys['q'] == 'UNKNOWN'


def test_submit_input(client, game_service):
    game_id = game_service.create_new_game("crane")

    response = client.post(f'/api/game/{game_id}/input/submit')
    assert response.status_code == 400
    assert response.get_json()['error_code'] == 'wrong_length'

    client.put(f'/api/game/{game_id}/input', json={'input': 'trace'})
    response = client.post(f'/api/game/{game_id}/input/submit')
    assert response.status_code == 200
    data = response.get_json()
    assert data['result'][1] == ['r', 'CORRECT']
    assert data['state']['guesses'] == ['trace']
    assert data['state']['input_word'] == ''

    assert client.post('/api/game/missing/input/submit').status_code == 404
