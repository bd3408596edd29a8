from conftest import register


def test_socket_connect_and_join_leaderboard(sio_client):
    assert sio_client.is_connected('/ws')

    # Flush any initial events
    sio_client.get_received('/ws')

    sio_client.emit('join_leaderboard', namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'joined' for pkt in received)

    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)


def test_completed_game_pushes_leaderboard_update(flask_app, sio_client, client, five_clue_board):
    sio_client.emit('join_leaderboard', namespace='/ws')
    sio_client.get_received('/ws')  # flush

    user = register(client, 'hunter', 'Hunter')
    state = client.post('/api/game/start').get_json()
    sid = state['session_id']
    for clue in state['board']:
        client.post(f"/api/game/{sid}/clues/{clue['clue_id']}/skip")
    client.post(f'/api/game/{sid}/final/wager', json={'wager': 800})
    res = client.post(f'/api/game/{sid}/final/answer', json={'answer': 'What is IBM?'})
    assert res.status_code == 200

    events = sio_client.get_received('/ws')
    updates = [e for e in events if e['name'] == 'leaderboard_update']
    assert len(updates) == 1
    assert updates[0]['args'][0]['player_id'] == user['id']
    assert updates[0]['args'][0]['score'] == 800


def test_left_readers_get_no_updates(flask_app, sio_client, client, five_clue_board):
    sio_client.emit('join_leaderboard', namespace='/ws')
    sio_client.emit('leave_leaderboard', namespace='/ws')
    sio_client.get_received('/ws')

    register(client, 'julia', 'Julia')
    state = client.post('/api/game/start').get_json()
    sid = state['session_id']
    for clue in state['board']:
        client.post(f"/api/game/{sid}/clues/{clue['clue_id']}/skip")
    client.post(f'/api/game/{sid}/final/wager', json={'wager': 0})
    client.post(f'/api/game/{sid}/final/answer', json={'answer': 'IBM'})

    events = sio_client.get_received('/ws')
    assert not any(e['name'] == 'leaderboard_update' for e in events)
