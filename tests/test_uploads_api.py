"""Tests for the upload URL handler."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

import pytest

from conftest import BUCKET, response_json
from versa.api.uploads import GenerateUploadUrlHandler, build_upload_key

KEY_PATTERN = re.compile(r'^uploads/[0-9a-f-]{36}\.(?P<ext>.+)$')


class TestBuildUploadKey:
    """Tests for upload key generation."""

    def test_extension_from_subtype(self) -> None:
        match = KEY_PATTERN.match(build_upload_key('image/png'))
        assert match and match.group('ext') == 'png'

    def test_empty_subtype_defaults_to_jpeg(self) -> None:
        assert build_upload_key('image/').endswith('.jpeg')

    def test_keys_are_unique(self) -> None:
        assert build_upload_key('image/png') != build_upload_key('image/png')


class TestGenerateUploadUrl:
    """Tests for GenerateUploadUrlHandler."""

    def test_defaults_to_jpeg(self, mocker, api_event) -> None:
        s3 = mocker.MagicMock()
        s3.generate_presigned_url.return_value = 'https://signed'

        response = GenerateUploadUrlHandler(s3, BUCKET)(api_event(path='/uploads/url'))

        assert response['statusCode'] == 200
        body = response_json(response)
        assert body['uploadUrl'] == 'https://signed'
        assert body['key'].endswith('.jpeg')
        s3.generate_presigned_url.assert_called_once_with(
            'put_object',
            Params={'Bucket': BUCKET, 'Key': body['key'], 'ContentType': 'image/jpeg'},
            ExpiresIn=300,
        )

    def test_png_key(self, mocker, api_event) -> None:
        s3 = mocker.MagicMock()
        s3.generate_presigned_url.return_value = 'https://signed'

        response = GenerateUploadUrlHandler(s3, BUCKET)(
            api_event(query={'contentType': 'image/png'})
        )

        key = response_json(response)['key']
        assert KEY_PATTERN.match(key)
        assert key.endswith('.png')

    @pytest.mark.parametrize('content_type', ['text/plain', 'application/pdf', 'imagepng'])
    def test_rejects_non_images(self, mocker, api_event, content_type) -> None:
        s3 = mocker.MagicMock()

        response = GenerateUploadUrlHandler(s3, BUCKET)(
            api_event(query={'contentType': content_type})
        )

        assert response['statusCode'] == 400
        assert response_json(response)['error'] == 'Invalid content type. Must be an image.'
        s3.generate_presigned_url.assert_not_called()

    def test_signing_failure_is_internal(self, mocker, api_event) -> None:
        s3 = mocker.MagicMock()
        s3.generate_presigned_url.side_effect = RuntimeError('no credentials')

        response = GenerateUploadUrlHandler(s3, BUCKET)(api_event())

        assert response['statusCode'] == 500
        assert response_json(response) == {'error': 'no credentials'}

    def test_signs_real_url(self, s3_client, api_event) -> None:
        response = GenerateUploadUrlHandler(s3_client, BUCKET)(
            api_event(query={'contentType': 'image/png'})
        )

        body = response_json(response)
        url = urlparse(body['uploadUrl'])
        query = parse_qs(url.query)
        assert url.path.endswith(body['key'])
        assert query['X-Amz-Expires'] == ['300']
