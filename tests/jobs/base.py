from tests.base import JenkinsTestBase


class JenkinsJobsTestBase(JenkinsTestBase):

    config_xml = """
        <project>
            <actions/>
            <description>before</description>
        </project>"""

    updated_config_xml = """
        <project>
            <actions/>
            <description>after</description>
        </project>"""

    job_info = {
        'name': 'Test Job',
        'url': 'http://example.com/job/Test%20Job/',
        'buildable': True,
        'color': 'blue',
        'nextBuildNumber': 2,
    }

    disabled_job_info = dict(job_info, buildable=False, color='disabled')

    job_list = {
        'jobs': [
            {'name': 'my_job1', 'color': 'blue', 'url': 'http://...'},
            {'name': 'my_job2', 'color': 'red', 'url': 'http://...'},
        ]
    }
