import requests_mock

import jenkins_rest
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsListJobsTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.get(self.make_url('api/json'), json=self.job_list)

        jobs = self.j.job.list()

        self.assertEqual(jobs, self.job_list['jobs'])
        self.assertEqual(req_mock.last_request.url, self.make_url('api/json'))

    @requests_mock.Mocker()
    def test_corrupt_response(self, req_mock):
        req_mock.get(self.make_url('api/json'), text='"trash')

        with self.assertRaises(jenkins_rest.BadDataException) as context_mgr:
            self.j.job.list()
        self.assertEqual(str(context_mgr.exception),
                         'jenkins: job.list: returned bad data')

    @requests_mock.Mocker()
    def test_missing_jobs_field(self, req_mock):
        req_mock.get(self.make_url('api/json'), json={'views': []})

        with self.assertRaises(jenkins_rest.BadDataException):
            self.j.job.list()

    @requests_mock.Mocker()
    def test_jobs_not_a_list(self, req_mock):
        req_mock.get(self.make_url('api/json'), json={'jobs': 'nope'})

        with self.assertRaises(jenkins_rest.BadDataException):
            self.j.job.list()
