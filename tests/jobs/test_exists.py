import requests_mock

import jenkins_rest
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsJobExistsTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_job_missing(self, req_mock):
        req_mock.head(self.make_url('job/TestJob-nope/api/json'),
                      status_code=404)

        self.assertFalse(self.j.job.exists('TestJob-nope'))
        self.assertEqual(
            self.got_requests(req_mock),
            [('HEAD', self.make_url('job/TestJob-nope/api/json?depth=0'))])

    @requests_mock.Mocker()
    def test_job_exists(self, req_mock):
        req_mock.head(self.make_url('job/TestJob/api/json'), status_code=200)

        self.assertIs(self.j.job.exists('TestJob'), True)

    @requests_mock.Mocker()
    def test_repeated_probe(self, req_mock):
        req_mock.head(self.make_url('job/TestJob/api/json'), status_code=200)

        self.assertEqual(self.j.job.exists('TestJob'),
                         self.j.job.exists('TestJob'))
        self.assertEqual(req_mock.call_count, 2)

    @requests_mock.Mocker()
    def test_unexpected_status(self, req_mock):
        req_mock.head(self.make_url('job/TestJob/api/json'), status_code=500)

        with self.assertRaises(jenkins_rest.ProtocolException) as context_mgr:
            self.j.job.exists('TestJob')
        self.assertEqual(str(context_mgr.exception),
                         'jenkins: job.exists: unexpected status code: 500')
