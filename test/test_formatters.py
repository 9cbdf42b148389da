#!/usr/bin/env python3
import os
import sys
import unittest
from datetime import datetime, timezone

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from beanstalk_relay.constants import BEANSTALK_CONSOLE_URL
from beanstalk_relay.formatters import build_slack_payload
from beanstalk_relay.parsing import NotificationRecord


def make_record(message="Environment health has transitioned from Ok to Warning.", application='myapp'):
    return NotificationRecord(
        timestamp=datetime(2019, 1, 2, 15, 4, 5, tzinfo=timezone.utc),
        message=message,
        environment_name='prod',
        application_name=application,
        environment_url='http://example.com',
    )


ENV_INFO = {'version_label': 'app-v42', 'environment_id': 'e-abc123'}


class TestBuildSlackPayload(unittest.TestCase):
    def test_payload_shape(self):
        payload = build_slack_payload(make_record(), ENV_INFO, channel='#deploys', username='EB')
        self.assertEqual(payload['channel'], '#deploys')
        self.assertEqual(payload['username'], 'EB')
        self.assertEqual(len(payload['attachments']), 1)

        attachment = payload['attachments'][0]
        self.assertEqual(attachment['color'], 'warning')
        self.assertEqual(attachment['text'], 'Environment health has transitioned from Ok to Warning.')
        titles = [f['title'] for f in attachment['fields']]
        self.assertEqual(titles, ['Version Label', 'Application', 'Environment', 'Environment URL', 'Timestamp'])

    def test_field_values(self):
        fields = {f['title']: f for f in build_slack_payload(make_record(), ENV_INFO)['attachments'][0]['fields']}
        self.assertEqual(fields['Version Label']['value'], 'app-v42')
        self.assertEqual(fields['Environment URL']['value'], 'http://example.com')
        self.assertEqual(fields['Timestamp']['value'], '2019-01-02T15:04:05Z')
        self.assertTrue(fields['Application']['short'])
        self.assertTrue(fields['Environment']['short'])
        self.assertNotIn('short', fields['Version Label'])
        self.assertNotIn('short', fields['Timestamp'])

    def test_environment_link(self):
        fields = {f['title']: f for f in build_slack_payload(make_record(), ENV_INFO)['attachments'][0]['fields']}
        self.assertEqual(
            fields['Environment']['value'],
            f"<{BEANSTALK_CONSOLE_URL}#/environment/dashboard?applicationName=myapp&environmentId=e-abc123|prod>",
        )

    def test_application_name_in_url_and_link_text(self):
        for name in ('myapp', 'billing-api', 'x'):
            with self.subTest(name=name):
                payload = build_slack_payload(make_record(application=name), ENV_INFO)
                value = payload['attachments'][0]['fields'][1]['value']
                self.assertIn(f"applicationName={name}|", value)
                self.assertTrue(value.endswith(f"|{name}>"))

    def test_color_tracks_severity(self):
        payload = build_slack_payload(make_record(message="Stack deletion failed."), ENV_INFO)
        self.assertEqual(payload['attachments'][0]['color'], 'danger')
        payload = build_slack_payload(make_record(message="Environment update completed successfully."), ENV_INFO)
        self.assertEqual(payload['attachments'][0]['color'], 'good')


if __name__ == '__main__':
    unittest.main()
