from conftest import login, register


def test_login_page(client):
    resp = client.get('/login')
    assert resp.status_code == 200
    assert '登录' in resp.get_data(as_text=True)


def test_register_auto_login_redirects_home(client, store):
    resp = register(client, 'alice', 'pw1')

    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/')

    alice = store.find_user_by_username('alice')
    assert alice.id == 2
    assert alice.is_admin is False

    data = client.get('/test-session').get_json()
    assert data['hasUser'] is True
    assert data['user'] == {'username': 'alice', 'isAdmin': False}


def test_register_duplicate(client):
    register(client, 'alice', 'pw1')

    resp = register(client, 'alice', 'pw2')

    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == '用户名已存在'
    assert resp.mimetype == 'text/plain'


def test_register_incomplete(client, store):
    resp = register(client, 'alice', '')

    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == '请填写完整信息'
    assert len(store.list_users()) == 1


def test_admin_login_redirects_to_dashboard(client):
    resp = login(client, 'admin', 'admin123')

    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/admin')


def test_user_login_redirects_home(client):
    register(client, 'alice', 'pw1')
    client.get('/logout')

    resp = login(client, 'alice', 'pw1')

    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/')


def test_login_wrong_password_rerenders_form(client):
    resp = login(client, 'admin', 'wrong')

    assert resp.status_code == 200
    assert '用户名或密码错误' in resp.get_data(as_text=True)
    assert client.get('/test-session').get_json()['hasUser'] is False


def test_login_missing_fields_rerenders_form(client):
    resp = client.post('/login', data={'username': 'admin'})

    assert resp.status_code == 200
    assert '请输入用户名和密码' in resp.get_data(as_text=True)


def test_logout_clears_session(client, app):
    login(client, 'admin', 'admin123')
    assert app.session_interface.active_count() == 1

    resp = client.get('/logout')

    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/')
    assert app.session_interface.active_count() == 0
    assert client.get('/admin').status_code == 403


def test_logout_without_session(client):
    resp = client.get('/logout')
    assert resp.status_code == 302


def test_logout_destroy_failure_still_redirects(client, app, monkeypatch):
    login(client, 'admin', 'admin123')

    def broken(session):
        raise RuntimeError('session store unavailable')

    monkeypatch.setattr(app.session_interface, 'destroy', broken)

    resp = client.get('/logout')

    assert resp.status_code == 302
    assert resp.headers['Location'].endswith('/')


def test_health(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json()['status'] == 'healthy'
