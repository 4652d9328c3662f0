import copy

import pytest


MINIMAL_EVENT = {
    "version": "2.0",
    "httpMethod": "GET",
    "headers": {"Accept": "text/html"},
    "queryStringParameters": {},
    "requestContext": {"identity": {}},
    "body": None,
    "isBase64Encoded": False,
}

FULL_EVENT = {
    "version": "2.0",
    "path": "/orders/42",
    "httpMethod": "POST",
    "headers": {
        "Content-Type": "application/json",
        "X-Forwarded-For": ["10.0.1.10", "10.0.2.20"],
        "User-Agent": "curl/8.4.0",
    },
    "queryStringParameters": {"expand": "items", "limit": "10"},
    "requestContext": {
        "serviceNetworkArn": "arn:aws:vpc-lattice:us-east-2:123456789012:servicenetwork/sn-0bf3f2882e9cc805a",
        "serviceArn": "arn:aws:vpc-lattice:us-east-2:123456789012:service/svc-0a40eebed65f8d69c",
        "targetGroupArn": "arn:aws:vpc-lattice:us-east-2:123456789012:targetgroup/tg-6d0ecf831eec9f09",
        "identity": {
            "sourceVpcArn": "arn:aws:ec2:us-east-2:123456789012:vpc/vpc-0b8276c84697e7339",
            "type": "AWS_IAM",
            "principal": "arn:aws:sts::123456789012:assumed-role/example-role/057d00f8b51257ba3c853a0f248943cf",
            "principalOrgId": "o-50dc6c495c0c9188",
            "sessionName": "057d00f8b51257ba3c853a0f248943cf",
            "x509IssuerOu": "Engineering",
            "x509SanDns": "client.example.com",
            "x509SanNameCn": "client",
            "x509SanUri": "spiffe://example.com/client",
            "x509SubjectCn": "client.example.com",
        },
        "region": "us-east-2",
        "timeEpoch": "1696331543569073",
    },
    "body": '{"quantity": 2}',
    "isBase64Encoded": False,
}

RESPONSE = {
    "isBase64Encoded": False,
    "statusCode": 200,
    "statusDescription": "200 OK",
    "headers": {
        "Content-Type": "application/json",
        "Set-Cookie": ["a=1; Path=/", "b=2; Path=/"],
    },
    "body": '{"ok": true}',
}


@pytest.fixture
def minimal_event():
    return copy.deepcopy(MINIMAL_EVENT)


@pytest.fixture
def full_event():
    return copy.deepcopy(FULL_EVENT)


@pytest.fixture
def response_payload():
    return copy.deepcopy(RESPONSE)


class FakeLambdaContext:
    """Subset of the Lambda context object used by the handler decorator."""

    def __init__(self, aws_request_id: str = "8f5e1c2a-6b1d-4c4e-9a57-5d7f0c3e2b11"):
        self.aws_request_id = aws_request_id
        self.function_name = "lattice-test-func"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()
