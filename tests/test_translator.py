"""
Unit tests for model / registry API translation.
"""
import pytest
from models import LoggingConfig, ResourceDefaultVersionModel, ResourceVersionModel
from translator import (
    translate_from_default_read_response,
    translate_from_list_response,
    translate_from_read_response,
    translate_to_create_request,
    translate_to_default_list_request,
    translate_to_default_read_request,
    translate_to_delete_request,
    translate_to_list_request,
    translate_to_read_request,
    translate_to_set_default_request,
    type_arn_from_version_arn,
    version_id_from_arn,
)

TYPE_ARN = 'arn:aws:cloudformation:us-west-2:123456789012:type/resource/AWS-Test-Resource'
VERSION_ARN = TYPE_ARN + '/00000003'


def describe_type_response(**overrides):
    response = {
        'Arn': VERSION_ARN,
        'Description': 'some resource',
        'DocumentationUrl': 'https://mydocs.org/some-resource',
        'ExecutionRoleArn': 'arn:aws:iam::123456789012:role/AppRole',
        'ProvisioningType': 'FULLY_MUTABLE',
        'Schema': '{ schema }',
        'SourceUrl': 'https://github.com/some-resource',
        'Type': 'RESOURCE',
        'TypeName': 'AWS::Test::Resource',
        'Visibility': 'PRIVATE',
        'DefaultVersionId': '00000001',
        'IsDefaultVersion': False,
    }
    response.update(overrides)
    return response


class TestArnHelpers:
    """Tests for version ARN parsing."""

    def test_version_id_from_arn(self):
        assert version_id_from_arn(VERSION_ARN) == '00000003'

    def test_version_id_from_type_arn(self):
        assert version_id_from_arn(TYPE_ARN) is None

    def test_version_id_from_none(self):
        assert version_id_from_arn(None) is None

    def test_type_arn_from_version_arn(self):
        assert type_arn_from_version_arn(VERSION_ARN) == TYPE_ARN

    def test_type_arn_unchanged_without_version(self):
        assert type_arn_from_version_arn(TYPE_ARN) == TYPE_ARN


class TestCreateRequest:
    """Tests for RegisterType translation."""

    def test_none_model(self):
        with pytest.raises(ValueError, match='model'):
            translate_to_create_request(None)

    def test_without_logging_config(self):
        model = ResourceVersionModel(
            ExecutionRoleArn='arn:aws:iam::123456789012:role/AppRole',
            SchemaHandlerPackage='s3://example-bucket/some/path/code.zip',
            TypeName='AWS::Test::Resource',
        )
        request = translate_to_create_request(model)

        assert request == {
            'Type': 'RESOURCE',
            'TypeName': 'AWS::Test::Resource',
            'SchemaHandlerPackage': 's3://example-bucket/some/path/code.zip',
            'ExecutionRoleArn': 'arn:aws:iam::123456789012:role/AppRole',
        }
        assert 'LoggingConfig' not in request

    def test_with_logging_config(self):
        model = ResourceVersionModel(
            SchemaHandlerPackage='s3://example-bucket/some/path/code.zip',
            TypeName='AWS::Test::Resource',
            LoggingConfig=LoggingConfig(
                LogGroupName='my-group',
                LogRoleArn='arn:aws:iam::123456789012:role/LoggingRole',
            ),
        )
        request = translate_to_create_request(model)

        assert request['LoggingConfig'] == {
            'LogGroupName': 'my-group',
            'LogRoleArn': 'arn:aws:iam::123456789012:role/LoggingRole',
        }
        assert 'ExecutionRoleArn' not in request


class TestReadRequest:
    """Tests for DescribeType request translation."""

    def test_none_model(self):
        with pytest.raises(ValueError, match='model'):
            translate_to_read_request(None)

    def test_by_arn(self):
        model = ResourceVersionModel(Arn=VERSION_ARN, TypeName='AWS::Test::Resource')
        assert translate_to_read_request(model) == {'Arn': VERSION_ARN}

    def test_by_type_name_and_version(self):
        model = ResourceVersionModel(TypeName='AWS::Test::Resource', VersionId='00000002')
        assert translate_to_read_request(model) == {
            'Type': 'RESOURCE',
            'TypeName': 'AWS::Test::Resource',
            'VersionId': '00000002',
        }


class TestReadResponse:
    """Tests for DescribeType response translation."""

    def test_none_response(self):
        with pytest.raises(ValueError, match='response'):
            translate_from_read_response(None)

    def test_without_logging_config(self):
        response = describe_type_response()
        model = translate_from_read_response(response)

        assert model.Arn == VERSION_ARN
        assert model.TypeArn == TYPE_ARN
        assert model.VersionId == '00000003'
        assert model.IsDefaultVersion is False
        assert model.ExecutionRoleArn == response['ExecutionRoleArn']
        assert model.ProvisioningType == 'FULLY_MUTABLE'
        assert model.TypeName == 'AWS::Test::Resource'
        assert model.Visibility == 'PRIVATE'
        assert model.LoggingConfig is None

    def test_with_logging_config(self):
        response = describe_type_response(LoggingConfig={
            'LogGroupName': 'my-group',
            'LogRoleArn': 'arn:aws:iam::123456789012:role/LoggingRole',
        })
        model = translate_from_read_response(response)

        assert model.LoggingConfig == LoggingConfig(
            LogGroupName='my-group',
            LogRoleArn='arn:aws:iam::123456789012:role/LoggingRole',
        )

    def test_create_request_from_read_model_keeps_logging_config(self):
        """Fields shared by both shapes survive a read followed by a register."""
        response = describe_type_response(LoggingConfig={
            'LogGroupName': 'my-group',
            'LogRoleArn': 'arn:aws:iam::123456789012:role/LoggingRole',
        })
        request = translate_to_create_request(translate_from_read_response(response))

        assert request['TypeName'] == response['TypeName']
        assert request['ExecutionRoleArn'] == response['ExecutionRoleArn']
        assert request['LoggingConfig'] == response['LoggingConfig']


class TestDeleteRequest:
    """Tests for DeregisterType translation."""

    def test_none_model(self):
        with pytest.raises(ValueError, match='model'):
            translate_to_delete_request(None)

    def test_default_version_deregisters_type(self):
        model = ResourceVersionModel(
            Arn=VERSION_ARN, IsDefaultVersion=True, TypeName='AWS::Test::Resource'
        )
        request = translate_to_delete_request(model)

        assert request == {'Type': 'RESOURCE', 'TypeName': 'AWS::Test::Resource'}
        assert 'Arn' not in request

    def test_other_version_deregisters_by_arn(self):
        model = ResourceVersionModel(Arn=VERSION_ARN, IsDefaultVersion=False)
        request = translate_to_delete_request(model)

        assert request == {'Arn': VERSION_ARN}


class TestListTranslation:
    """Tests for ListTypeVersions translation."""

    def test_request_none_model(self):
        with pytest.raises(ValueError, match='model'):
            translate_to_list_request(None)

    def test_request_by_type_name(self):
        model = ResourceVersionModel(TypeName='AWS::Test::Resource')
        assert translate_to_list_request(model, 'token-2') == {
            'Type': 'RESOURCE',
            'TypeName': 'AWS::Test::Resource',
            'DeprecatedStatus': 'LIVE',
            'NextToken': 'token-2',
        }

    def test_request_by_type_arn(self):
        model = ResourceVersionModel(TypeArn=TYPE_ARN, TypeName='AWS::Test::Resource')
        assert translate_to_list_request(model) == {
            'Arn': TYPE_ARN,
            'DeprecatedStatus': 'LIVE',
        }

    def test_response_none(self):
        with pytest.raises(ValueError, match='response'):
            translate_from_list_response(None)

    def test_response_no_types(self):
        assert translate_from_list_response({}) == []

    def test_response_with_types(self):
        response = {
            'TypeVersionSummaries': [
                {'Arn': 'Type1'},
                {'Arn': TYPE_ARN + '/00000002', 'TypeName': 'AWS::Test::Resource',
                 'VersionId': '00000002', 'IsDefaultVersion': True},
            ]
        }
        models = translate_from_list_response(response)

        assert len(models) == 2
        assert models[0].Arn == 'Type1'
        assert models[0].VersionId is None
        assert models[1].Arn == TYPE_ARN + '/00000002'
        assert models[1].TypeArn == TYPE_ARN
        assert models[1].VersionId == '00000002'
        assert models[1].IsDefaultVersion is True


class TestDefaultVersionTranslation:
    """Tests for ResourceDefaultVersion translation."""

    def test_set_default_none_model(self):
        with pytest.raises(ValueError, match='model'):
            translate_to_set_default_request(None)

    def test_set_default_by_arn(self):
        model = ResourceDefaultVersionModel(Arn=TYPE_ARN, DefaultVersionId='00000002')
        assert translate_to_set_default_request(model) == {
            'Arn': TYPE_ARN,
            'VersionId': '00000002',
        }

    def test_set_default_by_type_name(self):
        model = ResourceDefaultVersionModel(
            TypeName='AWS::Test::Resource', DefaultVersionId='00000002'
        )
        assert translate_to_set_default_request(model) == {
            'Type': 'RESOURCE',
            'TypeName': 'AWS::Test::Resource',
            'VersionId': '00000002',
        }

    def test_read_request_none_model(self):
        with pytest.raises(ValueError, match='model'):
            translate_to_default_read_request(None)

    def test_read_request_by_type_name(self):
        model = ResourceDefaultVersionModel(
            Arn=TYPE_ARN, TypeName='AWS::Test::Resource', DefaultVersionId='00000002'
        )
        assert translate_to_default_read_request(model) == {
            'Type': 'RESOURCE',
            'TypeName': 'AWS::Test::Resource',
            'VersionId': '00000002',
        }

    def test_read_request_by_arn_only(self):
        model = ResourceDefaultVersionModel(Arn=TYPE_ARN)
        assert translate_to_default_read_request(model) == {'Arn': TYPE_ARN}

    def test_read_response_none(self):
        with pytest.raises(ValueError, match='response'):
            translate_from_default_read_response(None)

    def test_read_response(self):
        model = translate_from_default_read_response(
            describe_type_response(DefaultVersionId='00000003')
        )
        assert model == ResourceDefaultVersionModel(
            Arn=TYPE_ARN,
            TypeName='AWS::Test::Resource',
            DefaultVersionId='00000003',
        )

    def test_list_request_none_model(self):
        with pytest.raises(ValueError, match='model'):
            translate_to_default_list_request(None)

    def test_list_request_by_type_name(self):
        model = ResourceDefaultVersionModel(TypeName='AWS::Test::Resource')
        assert translate_to_default_list_request(model, 'page-2') == {
            'Type': 'RESOURCE',
            'TypeName': 'AWS::Test::Resource',
            'DeprecatedStatus': 'LIVE',
            'NextToken': 'page-2',
        }

    def test_list_request_by_arn(self):
        model = ResourceDefaultVersionModel(Arn=TYPE_ARN, TypeName='AWS::Test::Resource')
        assert translate_to_default_list_request(model) == {
            'Arn': TYPE_ARN,
            'DeprecatedStatus': 'LIVE',
        }
