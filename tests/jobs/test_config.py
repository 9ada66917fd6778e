import requests_mock

import jenkins_rest
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsJobConfigTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_get(self, req_mock):
        req_mock.get(self.make_url('job/Test%20Job/config.xml'),
                     text=self.config_xml)

        config = self.j.job.config(u'Test Job')

        self.assertEqual(config, self.config_xml)
        self.assertEqual(req_mock.last_request.method, 'GET')

    @requests_mock.Mocker()
    def test_get_not_found(self, req_mock):
        req_mock.get(self.make_url('job/TestJob/config.xml'), status_code=404)

        with self.assertRaises(jenkins_rest.NotFoundException) as context_mgr:
            self.j.job.config(u'TestJob')
        self.assertEqual(str(context_mgr.exception),
                         'jenkins: job.config: TestJob not found')

    @requests_mock.Mocker()
    def test_update(self, req_mock):
        req_mock.post(self.make_url('job/Test%20Job/config.xml'))

        self.j.job.config(u'Test Job', self.updated_config_xml)

        request = req_mock.last_request
        self.assertEqual(request.method, 'POST')
        self.assertEqual(request.text, self.updated_config_xml)
        self.assertEqual(request.headers['Content-Type'],
                         'text/xml; charset=utf-8')

    @requests_mock.Mocker()
    def test_update_with_callable(self, req_mock):
        req_mock.get(self.make_url('job/TestJob/config.xml'),
                     text=self.config_xml)
        req_mock.post(self.make_url('job/TestJob/config.xml'))

        self.j.job.config(u'TestJob', lambda config: config.replace(
            '<description>before</description>',
            '<description>after</description>'))

        self.assertEqual(
            [method for method, _ in self.got_requests(req_mock)],
            ['GET', 'POST'])
        self.assertEqual(req_mock.last_request.text, self.updated_config_xml)

    @requests_mock.Mocker()
    def test_update_failed(self, req_mock):
        req_mock.post(self.make_url('job/TestJob/config.xml'), status_code=400,
                      headers={'X-Error': 'Failed to parse form data'})

        with self.assertRaises(jenkins_rest.ConflictException) as context_mgr:
            self.j.job.config(u'TestJob', '<project>')
        self.assertEqual(
            str(context_mgr.exception),
            'jenkins: job.config: Failed to parse form data')
