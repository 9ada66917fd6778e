import requests_mock

import jenkins_rest
from tests.base import JenkinsTestBase


class JenkinsQueueTestBase(JenkinsTestBase):

    queue_info = {
        'items': [{
            u'id': 25,
            u'task': {
                u'url': u'http://your_url/job/my_job/',
                u'color': u'aborted_anime',
                u'name': u'my_job'
            },
            u'stuck': False,
            u'actions': [
                {
                    u'causes': [
                        {
                            u'shortDescription': u'Started by timer',
                        },
                    ],
                },
            ],
            u'buildable': False,
            u'params': u'',
            u'buildableStartMilliseconds': 1315087293316,
            u'why': u'Build #2,532 is already in progress (ETA:10 min)',
            u'blocked': True,
        }]
    }


class JenkinsQueueListTest(JenkinsQueueTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.get(self.make_url('queue/api/json'), json=self.queue_info)

        queue = self.j.queue.list()

        self.assertEqual(queue, self.queue_info['items'])
        self.assertEqual(req_mock.last_request.url,
                         self.make_url('queue/api/json?depth=0'))

    @requests_mock.Mocker()
    def test_corrupt_response(self, req_mock):
        req_mock.get(self.make_url('queue/api/json'), text='"trash')

        with self.assertRaises(jenkins_rest.BadDataException) as context_mgr:
            self.j.queue.list()
        self.assertEqual(str(context_mgr.exception),
                         'jenkins: queue.list: returned bad data')


class JenkinsQueueGetTest(JenkinsQueueTestBase):

    @requests_mock.Mocker()
    def test_with_options(self, req_mock):
        req_mock.get(self.make_url('queue/api/json'), json=self.queue_info)

        queue = self.j.queue.get({'depth': 1})

        self.assertEqual(queue, self.queue_info)
        self.assertEqual(req_mock.last_request.url,
                         self.make_url('queue/api/json?depth=1'))


class JenkinsQueueItemTest(JenkinsQueueTestBase):

    queue_item = {
        u'_class': u'hudson.model.Queue$LeftItem',
        u'blocked': False,
        u'buildable': False,
        u'cancelled': False,
        u'executable': {u'_class': u'hudson.model.FreeStyleBuild',
                        u'number': 198,
                        u'url': u'http://your_url/job/my_job/198/'},
        u'id': 25,
        u'url': u'queue/item/25/',
        u'why': None,
    }

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.get(self.make_url('queue/item/25/api/json'),
                     json=self.queue_item)

        queue_item = self.j.queue.item(25)

        self.assertEqual(queue_item, self.queue_item)
        self.assertEqual(req_mock.last_request.url,
                         self.make_url('queue/item/25/api/json?depth=0'))

    @requests_mock.Mocker()
    def test_not_found(self, req_mock):
        req_mock.get(self.make_url('queue/item/25/api/json'), status_code=404)

        with self.assertRaises(jenkins_rest.NotFoundException) as context_mgr:
            self.j.queue.item(25)
        self.assertEqual(str(context_mgr.exception),
                         'jenkins: queue.item: 25 not found')


class JenkinsCancelQueueTest(JenkinsQueueTestBase):

    @requests_mock.Mocker()
    def test_simple(self, req_mock):
        req_mock.post(self.make_url('queue/items/1/cancelQueue'))

        self.j.queue.cancel(1)

        self.assertEqual(
            self.got_requests(req_mock),
            [('POST', self.make_url('queue/items/1/cancelQueue'))])
        self.assertFalse(req_mock.last_request.body)

    @requests_mock.Mocker()
    def test_failed(self, req_mock):
        req_mock.post(self.make_url('queue/items/1/cancelQueue'),
                      status_code=503)

        with self.assertRaises(jenkins_rest.JenkinsException) as context_mgr:
            self.j.queue.cancel(1)
        self.assertEqual(str(context_mgr.exception),
                         'jenkins: queue.cancel: unexpected status code: 503')

    @requests_mock.Mocker()
    def test_not_found_is_generic(self, req_mock):
        req_mock.post(self.make_url('queue/items/1/cancelQueue'),
                      status_code=404)

        with self.assertRaises(jenkins_rest.JenkinsException) as context_mgr:
            self.j.queue.cancel(1)
        self.assertNotIsInstance(context_mgr.exception,
                                 jenkins_rest.NotFoundException)
