from pathlib import Path

from profile_hub.core.config import settings


def _skill(client, headers, name, level='advanced', category='technical'):
    response = client.post('/api/user/skills', json={'name': name, 'level': level, 'category': category}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()['skills']


def test_own_profile_starts_empty(client, register_user):
    account = register_user()
    response = client.get('/api/user/profile', headers=account['headers'])
    assert response.status_code == 200
    body = response.json()
    assert body['success'] is True
    user = body['user']
    assert user['_id'] == account['user']['_id']
    assert user['email'] == account['email']
    for key in ('skills', 'achievements', 'experience', 'education', 'portfolio'):
        assert user[key] == []
    assert user['availability'] == {'forMentoring': False, 'forJobOpportunities': True, 'forNetworking': True}
    assert user['preferences']['profileVisibility'] == 'public'


def test_profile_requires_token(client):
    assert client.get('/api/user/profile').status_code in (401, 403)
    assert client.post('/api/user/skills', json={'name': 'Go'}).status_code in (401, 403)


def test_update_profile_merges_fields(client, register_user):
    account = register_user()
    response = client.put(
        '/api/user/profile',
        json={'bio': 'Builds things', 'location': 'Lagos', 'firstName': None},
        headers=account['headers'],
    )
    assert response.status_code == 200
    user = response.json()['user']
    assert user['bio'] == 'Builds things'
    assert user['location'] == 'Lagos'
    assert user['firstName'] == 'Ada'


def test_add_skill_returns_full_list_in_order(client, register_user):
    headers = register_user()['headers']
    _skill(client, headers, 'Python')
    skills = _skill(client, headers, 'JavaScript', level='expert')
    assert [item['name'] for item in skills] == ['Python', 'JavaScript']
    assert skills[-1]['level'] == 'expert'
    assert skills[-1]['endorsements'] == []
    assert skills[-1]['endorsementCount'] == 0
    assert skills[-1]['_id']


def test_add_skill_defaults_and_blank_name(client, register_user):
    headers = register_user()['headers']
    response = client.post('/api/user/skills', json={'name': ''}, headers=headers)
    assert response.status_code == 200
    skill = response.json()['skills'][0]
    assert skill['name'] == ''
    assert skill['level'] == 'intermediate'
    assert skill['category'] == 'technical'


def test_add_skill_rejects_unknown_level(client, register_user):
    headers = register_user()['headers']
    response = client.post('/api/user/skills', json={'name': 'Go', 'level': 'guru'}, headers=headers)
    assert response.status_code == 422
    missing = client.post('/api/user/skills', json={'level': 'expert'}, headers=headers)
    assert missing.status_code == 422


def test_delete_skill(client, register_user):
    headers = register_user()['headers']
    _skill(client, headers, 'Python')
    skills = _skill(client, headers, 'Rust')
    response = client.delete(f"/api/user/skills/{skills[0]['_id']}", headers=headers)
    assert response.status_code == 200
    assert [item['name'] for item in response.json()['skills']] == ['Rust']

    again = client.delete(f"/api/user/skills/{skills[0]['_id']}", headers=headers)
    assert again.status_code == 404
    assert again.json()['detail'] == 'Skill not found'


def test_cannot_delete_another_users_skill(client, register_user):
    owner = register_user()
    other = register_user()
    skills = _skill(client, owner['headers'], 'Python')
    response = client.delete(f"/api/user/skills/{skills[0]['_id']}", headers=other['headers'])
    assert response.status_code == 404
    profile = client.get('/api/user/profile', headers=owner['headers']).json()['user']
    assert len(profile['skills']) == 1


def test_endorse_skill_once_per_endorser(client, register_user):
    owner = register_user()
    endorser = register_user()
    skill_id = _skill(client, owner['headers'], 'JavaScript')[0]['_id']
    url = f"/api/user/{owner['user']['_id']}/skills/{skill_id}/endorse"

    response = client.post(url, json={'note': 'Great JavaScript developer!'}, headers=endorser['headers'])
    assert response.status_code == 200
    skill = response.json()['skills'][0]
    assert skill['endorsementCount'] == 1
    assert skill['endorsements'][0]['endorser'] == endorser['user']['_id']
    assert skill['endorsements'][0]['note'] == 'Great JavaScript developer!'

    duplicate = client.post(url, json={}, headers=endorser['headers'])
    assert duplicate.status_code == 400
    assert duplicate.json()['detail'] == 'Already endorsed this skill'

    own = client.post(url, json={}, headers=owner['headers'])
    assert own.status_code == 200
    assert own.json()['skills'][0]['endorsementCount'] == 2


def test_endorse_missing_targets(client, register_user):
    owner = register_user()
    endorser = register_user()
    skill_id = _skill(client, owner['headers'], 'Go')[0]['_id']

    unknown_user = client.post(f"/api/user/nobody/skills/{skill_id}/endorse", json={}, headers=endorser['headers'])
    assert unknown_user.status_code == 404
    assert unknown_user.json()['detail'] == 'User not found'

    unknown_skill = client.post(
        f"/api/user/{owner['user']['_id']}/skills/missing/endorse",
        json={},
        headers=endorser['headers'],
    )
    assert unknown_skill.status_code == 404
    assert unknown_skill.json()['detail'] == 'Skill not found'


def test_endorse_note_length_limit(client, register_user):
    owner = register_user()
    endorser = register_user()
    skill_id = _skill(client, owner['headers'], 'Go')[0]['_id']
    response = client.post(
        f"/api/user/{owner['user']['_id']}/skills/{skill_id}/endorse",
        json={'note': 'x' * 501},
        headers=endorser['headers'],
    )
    assert response.status_code == 422


def test_deleting_skill_drops_its_endorsements(client, register_user):
    owner = register_user()
    endorser = register_user()
    skill_id = _skill(client, owner['headers'], 'Go')[0]['_id']
    client.post(f"/api/user/{owner['user']['_id']}/skills/{skill_id}/endorse", json={}, headers=endorser['headers'])
    response = client.delete(f"/api/user/skills/{skill_id}", headers=owner['headers'])
    assert response.status_code == 200
    assert response.json()['skills'] == []


def test_achievements_delete_by_id_keeps_order(client, register_user):
    headers = register_user()['headers']
    ids = []
    for title in ('First', 'Second', 'Third'):
        response = client.post(
            '/api/user/achievements',
            json={'title': title, 'type': 'award', 'date': '2023-05-01', 'url': 'https://example.com'},
            headers=headers,
        )
        assert response.status_code == 200
        ids.append(response.json()['achievements'][-1]['_id'])

    response = client.delete(f"/api/user/achievements/{ids[1]}", headers=headers)
    assert response.status_code == 200
    achievements = response.json()['achievements']
    assert [item['title'] for item in achievements] == ['First', 'Third']
    assert achievements[0]['date'] == '2023-05-01'
    assert achievements[0]['type'] == 'award'


def test_achievement_defaults_to_other(client, register_user):
    headers = register_user()['headers']
    response = client.post('/api/user/achievements', json={'title': ''}, headers=headers)
    assert response.status_code == 200
    assert response.json()['achievements'][0]['type'] == 'other'
    bad = client.post('/api/user/achievements', json={'title': 'x', 'type': 'medal'}, headers=headers)
    assert bad.status_code == 422


def test_experience_crud(client, register_user):
    headers = register_user()['headers']
    payload = {
        'title': 'Software Engineer',
        'company': 'Tech Corp',
        'location': 'San Francisco, CA',
        'type': 'full-time',
        'startDate': '2024-01-01',
        'description': 'Full stack development',
        'isCurrentPosition': True,
    }
    created = client.post('/api/user/experience', json=payload, headers=headers)
    assert created.status_code == 200
    item = created.json()['experience'][0]
    assert item['isCurrentPosition'] is True
    assert item['startDate'] == '2024-01-01'

    updated = client.put(
        f"/api/user/experience/{item['_id']}",
        json={**payload, 'isCurrentPosition': False, 'endDate': '2024-06-30'},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()['experience'][0]['endDate'] == '2024-06-30'
    assert updated.json()['experience'][0]['_id'] == item['_id']

    deleted = client.delete(f"/api/user/experience/{item['_id']}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json()['experience'] == []

    missing = client.put(f"/api/user/experience/{item['_id']}", json=payload, headers=headers)
    assert missing.status_code == 404
    assert missing.json()['detail'] == 'Experience not found'


def test_experience_requires_start_date(client, register_user):
    headers = register_user()['headers']
    response = client.post('/api/user/experience', json={'title': 'Dev', 'company': 'Acme'}, headers=headers)
    assert response.status_code == 422


def test_education_keeps_achievement_list(client, register_user):
    headers = register_user()['headers']
    payload = {
        'institution': 'Tech University',
        'degree': 'Bachelor of Science',
        'field': 'Computer Science',
        'startYear': 2020,
        'endYear': 2024,
        'achievements': ["Dean's List", 'First Class Honors'],
    }
    created = client.post('/api/user/education', json=payload, headers=headers)
    assert created.status_code == 200
    item = created.json()['education'][0]
    assert item['achievements'] == ["Dean's List", 'First Class Honors']
    assert item['isCurrentlyStudying'] is False

    updated = client.put(
        f"/api/user/education/{item['_id']}",
        json={**payload, 'achievements': []},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()['education'][0]['achievements'] == []

    deleted = client.delete(f"/api/user/education/{item['_id']}", headers=headers)
    assert deleted.json()['education'] == []


def test_portfolio_crud(client, register_user):
    headers = register_user()['headers']
    payload = {
        'title': 'E-commerce Platform',
        'description': 'Built a full-stack e-commerce platform',
        'type': 'project',
        'technologies': ['React', 'Node.js', 'MongoDB'],
        'url': 'https://github.com/example/project',
    }
    created = client.post('/api/user/portfolio', json=payload, headers=headers)
    assert created.status_code == 200
    item = created.json()['portfolio'][0]
    assert item['technologies'] == ['React', 'Node.js', 'MongoDB']
    assert item['images'] == []
    assert item['isOngoing'] is False

    updated = client.put(
        f"/api/user/portfolio/{item['_id']}",
        json={**payload, 'title': 'Storefront', 'githubUrl': 'https://github.com/example/store'},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()['portfolio'][0]['title'] == 'Storefront'
    assert updated.json()['portfolio'][0]['githubUrl'] == 'https://github.com/example/store'

    deleted = client.delete(f"/api/user/portfolio/{item['_id']}", headers=headers)
    assert deleted.json()['portfolio'] == []
    missing = client.delete(f"/api/user/portfolio/{item['_id']}", headers=headers)
    assert missing.status_code == 404
    assert missing.json()['detail'] == 'Portfolio item not found'


def test_availability_patch_merges(client, register_user):
    headers = register_user()['headers']
    response = client.patch('/api/user/availability', json={'forMentoring': True}, headers=headers)
    assert response.status_code == 200
    assert response.json()['availability'] == {
        'forMentoring': True,
        'forJobOpportunities': True,
        'forNetworking': True,
    }

    response = client.patch('/api/user/availability', json={'forNetworking': False, 'forMentoring': None}, headers=headers)
    assert response.json()['availability'] == {
        'forMentoring': True,
        'forJobOpportunities': True,
        'forNetworking': False,
    }


def test_privacy_patch(client, register_user):
    headers = register_user()['headers']
    response = client.patch('/api/user/privacy', json={'showEmail': True, 'profileVisibility': 'alumni-only'}, headers=headers)
    assert response.status_code == 200
    preferences = response.json()['preferences']
    assert preferences['showEmail'] is True
    assert preferences['profileVisibility'] == 'alumni-only'
    assert preferences['emailNotifications'] is True

    bad = client.patch('/api/user/privacy', json={'profileVisibility': 'secret'}, headers=headers)
    assert bad.status_code == 422


def test_other_profile_hides_email_unless_shown(client, register_user):
    owner = register_user()
    viewer = register_user()
    _skill(client, owner['headers'], 'Python')
    url = f"/api/user/{owner['user']['_id']}/profile"

    response = client.get(url, headers=viewer['headers'])
    assert response.status_code == 200
    user = response.json()['user']
    assert user['email'] is None
    assert [item['name'] for item in user['skills']] == ['Python']

    own = client.get(url, headers=owner['headers'])
    assert own.json()['user']['email'] == owner['email']

    client.patch('/api/user/privacy', json={'showEmail': True}, headers=owner['headers'])
    shown = client.get(url, headers=viewer['headers'])
    assert shown.json()['user']['email'] == owner['email']


def test_unknown_profile_is_404(client, register_user):
    headers = register_user()['headers']
    response = client.get('/api/user/does-not-exist/profile', headers=headers)
    assert response.status_code == 404
    assert response.json()['detail'] == 'Profile not found'


def test_endorse_note_is_trimmed_before_length_check(client, register_user):
    owner = register_user()
    endorser = register_user()
    skill_id = _skill(client, owner['headers'], 'Go')[0]['_id']
    note = 'x' * 500
    response = client.post(
        f"/api/user/{owner['user']['_id']}/skills/{skill_id}/endorse",
        json={'note': f"   {note}  \n"},
        headers=endorser['headers'],
    )
    assert response.status_code == 200
    assert response.json()['skills'][0]['endorsements'][0]['note'] == note


def test_remove_endorsement(client, register_user):
    owner = register_user()
    endorser = register_user()
    skill_id = _skill(client, owner['headers'], 'Go')[0]['_id']
    url = f"/api/user/{owner['user']['_id']}/skills/{skill_id}/endorse"
    client.post(url, json={}, headers=endorser['headers'])

    response = client.delete(url, headers=endorser['headers'])
    assert response.status_code == 200
    assert response.json()['skills'][0]['endorsementCount'] == 0

    again = client.delete(url, headers=endorser['headers'])
    assert again.status_code == 404
    assert again.json()['detail'] == 'Endorsement not found'

    endorse_again = client.post(url, json={}, headers=endorser['headers'])
    assert endorse_again.status_code == 200


def test_profile_picture_upload_is_stored_and_served(client, register_user):
    account = register_user()
    response = client.post(
        '/api/user/profile-picture',
        files={'image': ('avatar.PNG', b'\x89PNG picture', 'image/png')},
        headers=account['headers'],
    )
    assert response.status_code == 200
    path = response.json()['profilePicture']
    assert path.startswith('/uploads/profile-')
    assert path.endswith('.png')
    assert (Path(settings.UPLOAD_DIR) / path.rsplit('/', 1)[-1]).read_bytes() == b'\x89PNG picture'

    served = client.get(path)
    assert served.status_code == 200
    assert served.content == b'\x89PNG picture'

    profile = client.get('/api/user/profile', headers=account['headers']).json()['user']
    assert profile['profilePicture'] == path
    assert profile['coverPicture'] == ''


def test_cover_picture_upload(client, register_user):
    account = register_user()
    response = client.post(
        '/api/user/cover-picture',
        files={'image': ('cover.jpeg', b'jpeg bytes', 'image/jpeg')},
        headers=account['headers'],
    )
    assert response.status_code == 200
    assert response.json()['coverPicture'].startswith('/uploads/cover-')


def test_upload_rejects_non_images_and_missing_files(client, register_user):
    headers = register_user()['headers']
    wrong_type = client.post(
        '/api/user/profile-picture',
        files={'image': ('notes.txt', b'hello', 'text/plain')},
        headers=headers,
    )
    assert wrong_type.status_code == 400
    assert wrong_type.json()['detail'] == 'Only image files are allowed'

    spoofed = client.post(
        '/api/user/profile-picture',
        files={'image': ('script.png', b'hello', 'text/html')},
        headers=headers,
    )
    assert spoofed.status_code == 400

    missing = client.post('/api/user/cover-picture', headers=headers)
    assert missing.status_code == 400
    assert missing.json()['detail'] == 'No file uploaded'


def test_upload_rejects_oversized_files(client, register_user, monkeypatch):
    monkeypatch.setattr(settings, 'UPLOAD_MAX_BYTES', 8)
    headers = register_user()['headers']
    response = client.post(
        '/api/user/profile-picture',
        files={'image': ('big.gif', b'GIF89a-too-large', 'image/gif')},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()['detail'].startswith('File size must be less than')


def test_portfolio_image_upload_appends(client, register_user):
    owner = register_user()
    other = register_user()
    created = client.post(
        '/api/user/portfolio',
        json={'title': 'Site', 'description': 'Personal site', 'images': ['/uploads/existing.png']},
        headers=owner['headers'],
    )
    item_id = created.json()['portfolio'][0]['_id']

    response = client.post(
        f"/api/user/portfolio/{item_id}/images",
        files={'image': ('shot.jpg', b'jpeg bytes', 'image/jpeg')},
        headers=owner['headers'],
    )
    assert response.status_code == 200
    images = response.json()['portfolio'][0]['images']
    assert images[0] == '/uploads/existing.png'
    assert images[1].startswith('/uploads/portfolio-')

    foreign = client.post(
        f"/api/user/portfolio/{item_id}/images",
        files={'image': ('shot.jpg', b'jpeg bytes', 'image/jpeg')},
        headers=other['headers'],
    )
    assert foreign.status_code == 404
