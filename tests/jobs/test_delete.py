import requests_mock

import jenkins_rest
from tests.jobs.base import JenkinsJobsTestBase


class JenkinsDestroyJobTest(JenkinsJobsTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.head(self.make_url('job/Test%20Job/api/json'), [
            {'status_code': 200},
            {'status_code': 404},
        ])
        req_mock.post(self.make_url('job/Test%20Job/doDelete'),
                      status_code=302)

        self.assertTrue(self.j.job.exists(u'Test Job'))
        self.j.job.destroy(u'Test Job')
        self.assertFalse(self.j.job.exists(u'Test Job'))

        self.assertEqual(
            self.got_requests(req_mock)[1],
            ('POST', self.make_url('job/Test%20Job/doDelete')))

    @requests_mock.Mocker()
    def test_failed(self, req_mock):
        req_mock.post(self.make_url('job/test/doDelete'), status_code=200)

        with self.assertRaises(
                jenkins_rest.OperationFailedException) as context_manager:
            self.j.job.destroy(u'test')
        self.assertEqual(
            str(context_manager.exception),
            'jenkins: job.destroy: failed to delete: test')

    @requests_mock.Mocker()
    def test_not_found(self, req_mock):
        req_mock.post(self.make_url('job/test/doDelete'), status_code=404)

        with self.assertRaises(jenkins_rest.NotFoundException):
            self.j.job.destroy(u'test')
