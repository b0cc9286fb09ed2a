import pytest

QR_DATA_URL = 'data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk'


def ticket_payload(user_id: str, event_id: str = 'evt-1', name: str = 'A') -> dict:
    return {
        'userId': user_id,
        'eventId': event_id,
        'ticketDetails': {
            'name': name,
            'email': 'a@x.com',
            'eventName': 'Jazz Night',
            'eventDate': '2026-11-20',
            'eventTime': '20:00',
            'ticketPrice': 25.5,
            'qrDataUrl': QR_DATA_URL,
        },
    }


@pytest.fixture
def owner(register_user, login) -> dict:
    user = register_user()
    login()
    return user


class TestCreateTicket:
    def test_ticket_is_stored_as_sent(self, client):
        response = client.post('/tickets', json=ticket_payload('user-1'))

        assert response.status_code == 201
        assert list(response.json()) == ['ticket']
        ticket = response.json()['ticket']
        assert ticket['id']
        assert ticket['userId'] == 'user-1'
        assert ticket['eventId'] == 'evt-1'
        assert ticket['ticketDetails']['qrDataUrl'] == QR_DATA_URL
        assert ticket['ticketDetails']['ticketPrice'] == 25.5

    def test_event_reference_is_not_checked(self, client):
        response = client.post('/tickets', json=ticket_payload('user-1', event_id='no-such-event'))
        assert response.status_code == 201

    def test_missing_details_is_unprocessable(self, client):
        response = client.post('/tickets', json={'userId': 'user-1', 'eventId': 'evt-1'})
        assert response.status_code == 422


class TestListTickets:
    def test_list_by_user_filters_on_owner(self, client):
        client.post('/tickets', json=ticket_payload('user-1'))
        client.post('/tickets', json=ticket_payload('user-1', event_id='evt-2'))
        client.post('/tickets', json=ticket_payload('user-2'))

        response = client.get('/tickets/user/user-1')

        assert response.status_code == 200
        assert sorted(ticket['eventId'] for ticket in response.json()) == ['evt-1', 'evt-2']

    def test_list_by_id_path_returns_every_ticket(self, client):
        first = client.post('/tickets', json=ticket_payload('user-1')).json()['ticket']
        client.post('/tickets', json=ticket_payload('user-2'))

        response = client.get(f"/tickets/{first['id']}")

        assert response.status_code == 200
        assert len(response.json()) == 2


class TestDeleteTicket:
    def test_owner_can_delete(self, client, owner):
        ticket = client.post('/tickets', json=ticket_payload(owner['id'])).json()['ticket']

        response = client.delete(f"/tickets/{ticket['id']}")

        assert response.status_code == 204
        assert client.get(f"/tickets/user/{owner['id']}").json() == []

    def test_other_users_ticket_is_forbidden(self, client, owner):
        ticket = client.post('/tickets', json=ticket_payload('someone-else')).json()['ticket']

        response = client.delete(f"/tickets/{ticket['id']}")

        assert response.status_code == 403
        assert len(client.get('/tickets/user/someone-else').json()) == 1

    def test_missing_ticket_is_not_found(self, client, owner):
        assert client.delete('/tickets/does-not-exist').status_code == 404

    def test_delete_requires_token(self, client):
        ticket = client.post('/tickets', json=ticket_payload('user-1')).json()['ticket']

        assert client.delete(f"/tickets/{ticket['id']}").status_code == 401
